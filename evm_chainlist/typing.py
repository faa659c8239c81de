from typing import Any, Mapping, Union

ChainValue = Union[str, int]
Metadata = Mapping[str, Any]
