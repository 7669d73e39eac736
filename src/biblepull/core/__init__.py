from .converter import PassageConverter, convert_passage

__all__ = ["PassageConverter", "convert_passage"]
