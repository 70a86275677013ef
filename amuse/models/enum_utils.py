# amuse/models/enum_utils.py
from typing import Any
from amuse.models.enums import RepeatType

# player token → protocol value; everything else is NONE
_REPEAT_TOKENS = {
    "on":  RepeatType.ONE,
    "all": RepeatType.ALL,
}

def normalize_repeat_mode(value: Any) -> RepeatType:
    """Map the player's repeatMode ("on" / "all" / "off") to a RepeatType. Total: never raises."""
    if not isinstance(value, str):
        return RepeatType.NONE
    return _REPEAT_TOKENS.get(value, RepeatType.NONE)
