from chipmunk import LispValue
from chipmunk.types.nil import Nil


def is_truthy(value: LispValue) -> bool:
    """Only false and nil are false; 0, "" and () are true."""
    return not (value is False or value is Nil)
