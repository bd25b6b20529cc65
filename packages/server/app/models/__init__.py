# SQLModel definitions — imported here to ensure metadata is populated for create_all.
from .base import TimestampMixin  # noqa: F401
from .task import IdSequence, Task  # noqa: F401
