"""FastAPI routers exposing the customer and product use cases."""
