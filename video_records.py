import json
from pathlib import Path
from typing import Any, List, Union

from pydantic import ValidationError

from errors import InvalidRecord
from models import VideoRecord


def load_video_records(file_path: Union[str, Path]) -> List[VideoRecord]:
    """
    Reads a JSON file holding an array of videos.

    Each element has the keys ``id``, ``views_count``, ``likes_count``,
    ``dislikes_count`` and ``topic_ids``.

    Args:
        file_path: Path of the JSON file

    Returns:
        The validated video records, in file order

    Raises:
        FileNotFoundError: if the file does not exist
        InvalidRecord: if the file is not valid UTF-8 JSON or an element is malformed
    """
    try:
        raw = json.loads(Path(file_path).read_text(encoding="utf-8"))
    except (UnicodeDecodeError, json.JSONDecodeError) as e:
        raise InvalidRecord(f"{file_path} is not valid UTF-8 JSON: {e}") from e

    return parse_video_records(raw)


def parse_video_records(raw: Any) -> List[VideoRecord]:
    """Validates decoded JSON into video records. Fails on the first bad element."""
    if not isinstance(raw, list):
        raise InvalidRecord(f"expected a JSON array of videos, got {type(raw).__name__}")

    records: List[VideoRecord] = []
    for index, item in enumerate(raw):
        try:
            records.append(VideoRecord.model_validate(item))
        except ValidationError as e:
            raise InvalidRecord(str(e), index=index) from e

    return records
