"""Custom types."""
from typing import Union, Sequence
import array
import os

Units = Union[str, bytes, bytearray, memoryview, 'array.array[int]', Sequence[str], Sequence[int]]
WcUnits = Union[Units, 'os.PathLike[str]', 'os.PathLike[bytes]']
