from yql_query.types.base import YqlBaseModel

__all__ = ["YqlBaseModel"]
