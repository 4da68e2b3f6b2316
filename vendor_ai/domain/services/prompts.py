from datetime import date, datetime, timezone
from decimal import ROUND_HALF_UP, Decimal
from typing import Optional, Union

from vendor_ai.domain.models.product import ProductRecord
from vendor_ai.domain.services.constants import RISK_LEVELS

SYSTEM_PROMPT = (
    "You are a smart and decisive Vendor Sales AI.\n"
    "Given product and sales data, return exactly ONE most probable and impactful action the vendor should take.\n\n"
    "Respond with:\n"
    "1. Top Action (short title)\n"
    "2. Reason (based on expiry, sales trends, stock, price etc.)\n"
    f"3. Risk Level ({', '.join(RISK_LEVELS[:-1])}, or {RISK_LEVELS[-1]})\n\n"
    "❗ Do NOT list multiple actions. Choose just one strategic action based on the product context.\n\n"
    "Example:\n"
    "1. **Top Action: Offer Discount to Clear Stock**\n"
    "2. **Reason:** The product is close to expiry, and sales are slower than needed to clear inventory. "
    "A discount can accelerate sales.\n"
    "3. **Risk Level: Moderate**"
)


def utc_today() -> date:
    """Current calendar date in UTC (no time component)."""
    return datetime.now(timezone.utc).date()


def _num(value: Union[int, float]) -> str:
    # 10.0 -> "10", 2.5 -> "2.5": print numbers the way the JSON payload wrote them
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def _fixed2(value: float) -> str:
    # Two decimals, ties rounded away from zero on the exact binary value (0.125 -> "0.13")
    if value == 0:
        value = 0.0  # no "-0.00"
    return format(Decimal(value).quantize(Decimal("0.01"), rounding=ROUND_HALF_UP), "f")


def build_prompt(record: ProductRecord, today: Optional[date] = None) -> str:
    """
    Render one product as the user message sent to the model.
    `today` defaults to the UTC date at call time; pass it to get a deterministic prompt.
    """
    today = today or utc_today()
    lines = [
        f"Product Name: {record.product_name}",
        f"Vendor: {record.vendor}",
        f"Category: {record.category}",
        f"Stock Quantity: {_num(record.stock_qty)}",
        f"Units Sold per Day: {_fixed2(record.units_per_day)}",
        f"Selling Price: {_num(record.price)} {record.currency}",
        f"Wholesale Price: {_num(record.wholesale_price)} {record.currency}",
        f"Manufacture Date: {record.manufacture_date}",
        f"Expiry Date: {record.expiry_date}",
        f"Product Expiry Days: {record.product_expiry_days}",
        f"Today: {today.isoformat()}",
    ]
    return "\n".join(lines).strip()
