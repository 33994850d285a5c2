from typing import Optional
from typing import Union


def to_normal_str(text: Union[str, bytes, None]) -> Optional[str]:
    """
    Make sure we return a normal string with unix line endings, no
    matter if we got bytes or str
    """
    if text is None:
        return text
    if not isinstance(text, str):
        text = text.decode("utf-8")
    text = text.replace("\r\n", "\n")
    return text


def to_unicode(text: Union[str, bytes, None]) -> Optional[str]:
    if text and isinstance(text, bytes):
        return text.decode("utf-8")
    return text
