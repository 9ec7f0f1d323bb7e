"""PEM framing for raw key bytes."""
from __future__ import annotations

import re
from typing import List, Optional

from ..logging import get_logger
from ..models import KeyKind
from ..utils.b64 import b64d_tolerant, b64e_wrapped
from ..utils.errors import InvalidParameter
from .der import strip_public_key_wrapper

BEGIN = "-----BEGIN"
END = "-----END"
DEFAULT_LINE_LENGTH = 64

_LABEL = re.compile(r"^-----BEGIN(.*)KEY-----")

log = get_logger("keycodec.pem")


def _label_for(kind: Optional[KeyKind]) -> str:
    return kind.label if kind is not None else " "


def encode_pem(
    data: bytes, kind: Optional[KeyKind], *, line_length: int = DEFAULT_LINE_LENGTH
) -> str:
    """Frame ``data`` as PEM text.

    ``kind`` selects the ``PUBLIC``/``PRIVATE`` label; ``None`` gives the
    unlabelled ``-----BEGIN KEY-----`` frame.
    """
    label = _label_for(kind)
    body = b64e_wrapped(bytes(data), line_length)
    return f"{BEGIN}{label}KEY-----\n{body}\n{END}{label}KEY-----"


def decode_pem(text: str, kind: KeyKind, *, strip_wrapper: bool = True) -> bytes:
    """Decode PEM text back into raw key bytes.

    Public keys are passed through :func:`strip_public_key_wrapper`. Raises
    :class:`InvalidParameter` when the text is not framed or its body holds no
    usable base64.
    """
    lines = text.splitlines()
    frame = [line for line in lines if line.startswith((BEGIN, END))]
    if not any(line.startswith(BEGIN) for line in frame) or not any(line.startswith(END) for line in frame):
        raise InvalidParameter("PEM text is missing its BEGIN/END frame")
    _check_label(frame, kind)

    body = [line for line in lines if not line.startswith((BEGIN, END))]
    data = b64d_tolerant("".join(body))
    if kind is KeyKind.PUBLIC and strip_wrapper:
        data = strip_public_key_wrapper(data)
    return data


def _check_label(frame: List[str], kind: KeyKind) -> None:
    for line in frame:
        match = _LABEL.match(line)
        if match and match.group(1).strip() not in ("", kind.value):
            log.warning("pem label does not match key kind", label=match.group(1).strip(), kind=kind.value)


__all__ = ["encode_pem", "decode_pem", "BEGIN", "END", "DEFAULT_LINE_LENGTH"]
