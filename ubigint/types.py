"""Pydantic field type for BigInt.

Lets BigInt values appear in pydantic models: input may be a BigInt, an
int or decimal text, and the value always serializes as decimal text.

Example:
    class Balance(BaseModel):
        amount: BigIntField

    Balance(amount="1000000000000000000000").model_dump_json()
    # '{"amount":"1000000000000000000000"}'
"""

from typing import Annotated, Any

from pydantic import GetCoreSchemaHandler, GetJsonSchemaHandler
from pydantic.json_schema import JsonSchemaValue
from pydantic_core import core_schema

from ubigint.bigint import BigInt


def validate_bigint(value: Any) -> BigInt:
    """Convert a model input into a BigInt.

    Args:
        value: BigInt, int, or decimal string (non-digits are ignored)

    Returns:
        An independent BigInt

    Raises:
        ValueError: If value is of any other type
    """
    if isinstance(value, (BigInt, str, int)):
        return BigInt(value)
    raise ValueError(f"BigInt must be string or int, got {type(value).__name__}")


class _BigIntAnnotation:
    @classmethod
    def __get_pydantic_core_schema__(
        cls, _source_type: Any, _handler: GetCoreSchemaHandler
    ) -> core_schema.CoreSchema:
        return core_schema.no_info_plain_validator_function(
            validate_bigint,
            serialization=core_schema.plain_serializer_function_ser_schema(
                str, return_schema=core_schema.str_schema()
            ),
        )

    @classmethod
    def __get_pydantic_json_schema__(
        cls, _core_schema: core_schema.CoreSchema, handler: GetJsonSchemaHandler
    ) -> JsonSchemaValue:
        json_schema = handler(core_schema.str_schema(pattern=r"^[0-9]+$"))
        json_schema["description"] = "Unsigned arbitrary-precision integer as decimal string"
        return json_schema


# Unsigned arbitrary-precision integer, serialized as decimal string
BigIntField = Annotated[BigInt, _BigIntAnnotation]
