__all__ = ["cli", "config", "renderer", "scenarios"]
