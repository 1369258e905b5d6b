__all__ = ["models", "loader", "sampling"]
