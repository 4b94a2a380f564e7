from enum import Enum

from steering_rules.rules.models import InclusionMode


class UIStyle(str, Enum):
    BLUE = "blue"
    GREEN = "green"
    RED = "red"
    CYAN = "cyan"
    MAGENTA = "magenta"
    DIM = "dim"
    WHITE = "white"


INCLUSION_MODE_STYLE = {
    InclusionMode.ALWAYS: UIStyle.GREEN.value,
    InclusionMode.FILE_MATCH: UIStyle.CYAN.value,
    InclusionMode.MANUAL: UIStyle.MAGENTA.value,
}
