"""BigCommerce provider - declarative management of store webhooks."""
__version__ = "0.1.0"
