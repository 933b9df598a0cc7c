"""Schema ordering for generated output."""

from .models import EnumSchema


def order_schemas(schemas: list[EnumSchema], sort: bool = True) -> list[EnumSchema]:
    """Return schemas sorted by name, or in declaration order.

    Sorting compares names by code point. Member order inside each schema
    is never changed.
    """
    if not sort:
        return list(schemas)
    return sorted(schemas, key=lambda schema: schema.name)
