import pydantic

from todo_app.errors import ValidationError


def parse(schema, **data):
    """Build an input schema, turning pydantic's error into ours.

    Only the first problem is reported; the console shows one message at a time.
    """
    try:
        return schema(**data)
    except pydantic.ValidationError as exc:
        first = exc.errors()[0]
        msg = str(first.get("msg", "Invalid input"))
        raise ValidationError(msg.removeprefix("Value error, ")) from exc
