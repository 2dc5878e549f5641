from .validator import ValidationPipeline, validate

__all__ = ["ValidationPipeline", "validate"]
