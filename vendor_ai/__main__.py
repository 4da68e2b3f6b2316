from vendor_ai.main import run

run()
