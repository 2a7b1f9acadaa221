from typing import Any, Dict

# Type aliases
VideoDict = Dict[str, Any]
VideoId = str
TopicId = str
