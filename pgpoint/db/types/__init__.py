from .pg_point import GeometryPoint, NullableGeometryPoint

__all__ = ["GeometryPoint", "NullableGeometryPoint"]
