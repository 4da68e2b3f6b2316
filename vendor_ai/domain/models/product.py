from pydantic import BaseModel, ConfigDict, Field
from typing import List, Union

Number = Union[int, float]  # int first: keep 10 as 10, not 10.0

class ProductRecord(BaseModel):
    """
    One vendor product as posted by the dashboard.
    Wire keys are the spreadsheet display labels ("Product Name", "Units/Day", ...).
    """
    product_name: str = Field(alias="Product Name")
    vendor: str = Field(alias="Vendor")
    category: str = Field(alias="Category")
    stock_qty: Number = Field(alias="Stock Qty")
    units_per_day: float = Field(alias="Units/Day")
    price: Number = Field(alias="Price")
    currency: str = Field(alias="Currency")
    wholesale_price: Number = Field(alias="Wholesale Price")
    manufacture_date: str = Field(alias="Manufacture Date")
    expiry_date: str = Field(alias="Expiry Date")
    product_expiry_days: int = Field(alias="Product Expiry Days")

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")  # immuable = safe

class SuggestionResult(BaseModel):
    product_name: str = Field(alias="productName")
    suggestion: str = ""
    model_config = ConfigDict(frozen=True, populate_by_name=True) # immuable = safe

class SuggestionsResponse(BaseModel):
    suggestions: List[SuggestionResult]
    model_config = {"frozen": True} # immuable = safe

class ErrorResponse(BaseModel):
    error: str
