from typing import Optional, Set, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator

from type_aliases import TopicId, VideoId


class VideoRecord(BaseModel):
    """A single video with its engagement counters and the topics it belongs to."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    id: VideoId = Field(strict=True)
    views_count: int = Field(ge=0, strict=True)
    likes_count: int = Field(ge=0, strict=True)
    dislikes_count: int = Field(ge=0, strict=True)
    topic_ids: Tuple[TopicId, ...]

    @field_validator("topic_ids")
    @classmethod
    def drop_duplicate_topics(cls, topic_ids: Tuple[TopicId, ...]) -> Tuple[TopicId, ...]:
        """A topic listed twice in a record counts once, the first occurrence keeps its place."""
        return tuple(dict.fromkeys(topic_ids))


class TopicAggregate(BaseModel):
    """
    Running totals of a topic over all the videos referencing it.

    An aggregate without an ``id`` is the zero baseline, i.e. no topic was found.
    """

    id: Optional[TopicId] = None
    views_count: int = 0
    likes_count: int = 0
    dislikes_count: int = 0
    video_ids: Set[VideoId] = Field(default_factory=set)

    @property
    def is_empty(self) -> bool:
        return self.id is None

    def add_video(self, video: VideoRecord) -> None:
        """Adds the counters of ``video`` and records its id.

        Counters grow on every call, even for a video id already recorded.
        """
        self.views_count += video.views_count
        self.likes_count += video.likes_count
        self.dislikes_count += video.dislikes_count
        self.video_ids.add(video.id)

    def __add__(self, other: "TopicAggregate") -> "TopicAggregate":
        """
        Merges two partial aggregates of the same topic. Immutable, returns a new
        ``TopicAggregate`` with summed counters and the union of the video ids.

        Handy when shards of the videos are aggregated separately and the
        per-shard topic maps need to be folded into a single result.
        """
        if not isinstance(other, TopicAggregate):
            return NotImplemented

        if self.id is not None and other.id is not None and self.id != other.id:
            raise ValueError(f"Cannot merge topic '{self.id}' with topic '{other.id}'")

        return TopicAggregate(
            id=self.id if self.id is not None else other.id,
            views_count=self.views_count + other.views_count,
            likes_count=self.likes_count + other.likes_count,
            dislikes_count=self.dislikes_count + other.dislikes_count,
            video_ids=self.video_ids | other.video_ids,
        )
