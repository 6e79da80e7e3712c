from enum import Enum


class _LazycellError:
    def __str__(self):
        s = type(self).__name__
        if len(self.args):
            s += ": " + " ".join([str(a) for a in self.args])
        return s


class ValueAbsent(_LazycellError, LookupError):
    """Raised when a root cell is read while it holds no value"""


class TypeMismatch(_LazycellError, TypeError):
    """Raised when a value does not match the declared type of a cell"""


class ConfigurationError(_LazycellError, Exception):
    """lazycell configuration error"""


class MyEnum(Enum):
    def __lt__(self, other):
        if other is None:
            return False
        return self.value < other.value


CellStatusEnum = MyEnum("CellStatusEnum", (
    "CACHED",
    "UNCOMPUTED",
))
