from typing import Callable, List, Tuple

StrHeaderListType = List[Tuple[str, str]]
RawHeaderListType = List[Tuple[bytes, bytes]]
AddNoteMethodType = Callable[..., None]
