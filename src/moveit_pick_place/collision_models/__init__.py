"""Import classes representing collision geometry."""

from .primitive_shapes import AnyPrimitive as AnyPrimitive
from .primitive_shapes import Box as Box
from .primitive_shapes import Cylinder as Cylinder
from .primitive_shapes import PrimitiveShape as PrimitiveShape
from .primitive_shapes import Sphere as Sphere
from .primitive_shapes import create_primitive_shape as create_primitive_shape
