"""SelectShop interest-product catalog."""
