from object_tasks.objects.config import SerializerConfig
from object_tasks.objects.errors import ParseError
from object_tasks.objects.serialization import from_json, get_json
from object_tasks.objects.shapes import Circle, Rectangle

__all__ = [
    "Rectangle",
    "Circle",
    "get_json",
    "from_json",
    "ParseError",
    "SerializerConfig",
]
