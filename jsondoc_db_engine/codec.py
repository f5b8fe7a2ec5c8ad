from __future__ import annotations
import json
from typing import Any, Dict, Optional, Tuple, Union

from .errors import DecodeError

ID_KEY = "Id"
DATA_KEY = "Data"

def encode(rec_id: str, payload: Dict[str, Any], indent: Union[str, int, None] = "\t") -> bytes:
    """
    Serialize the on-disk envelope:

        {
        	"Id": "<rec_id>",
        	"Data": {...}
        }

    Id always precedes Data; the document ends with a newline.
    """
    envelope = {ID_KEY: rec_id, DATA_KEY: payload}
    text = json.dumps(envelope, indent=indent, ensure_ascii=False)
    return (text + "\n").encode("utf-8")

def decode(raw: Union[bytes, str], path: Optional[str] = None) -> Tuple[str, Dict[str, Any]]:
    try:
        obj = json.loads(raw)
    except (UnicodeDecodeError, json.JSONDecodeError) as e:
        raise DecodeError(f"malformed record file: {e}", path) from e
    if not isinstance(obj, dict):
        raise DecodeError("record envelope is not a JSON object", path)
    rec_id = obj.get(ID_KEY)
    if not isinstance(rec_id, str):
        raise DecodeError(f"record envelope has no string {ID_KEY!r}", path)
    data = obj.get(DATA_KEY)
    if not isinstance(data, dict):
        raise DecodeError(f"record envelope has no object {DATA_KEY!r}", path)
    return rec_id, data
