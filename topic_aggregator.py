from logging import Logger
from typing import Any, Dict, Iterable, Tuple, Union

from pydantic import ValidationError
from tqdm import tqdm

from errors import InvalidRecord
from models import TopicAggregate, VideoRecord
from type_aliases import TopicId, VideoDict


class TopicAggregator:
    """
    Sums the engagement counters of videos by topic and finds the most viewed topic.

    Every call works on its own accumulator, nothing is kept between runs.
    """

    def __init__(self, logger: Logger, show_progress: bool = False):
        self.logger = logger
        self.show_progress = show_progress

    def aggregate(
        self, videos: Iterable[Union[VideoRecord, VideoDict]]
    ) -> TopicAggregate:
        """
        Returns the aggregate of the topic with the highest views count.

        On ties, the topic which reached the maximum first wins. When the videos
        reference no topic at all, the zero baseline (``is_empty``) is returned.
        """
        _, best = self.fold(videos)
        return best

    def aggregate_topics(
        self, videos: Iterable[Union[VideoRecord, VideoDict]]
    ) -> Dict[TopicId, TopicAggregate]:
        """Returns {topic_id → aggregate} for every topic referenced by ``videos``."""
        accumulator, _ = self.fold(videos)
        return accumulator

    def fold(
        self, videos: Iterable[Union[VideoRecord, VideoDict]]
    ) -> Tuple[Dict[TopicId, TopicAggregate], TopicAggregate]:
        """
        Single pass over every (video, topic) pair.

        Args:
            videos: Video records, or raw dicts validated on the fly

        Returns:
            The per topic accumulator and the most viewed topic. The latter is
            one of the accumulator entries, not a copy.

        Raises:
            InvalidRecord: at the first malformed video, the whole run is rejected.
        """
        self.logger.info("Started aggregating videos by topic...")

        accumulator: Dict[TopicId, TopicAggregate] = {}
        best = TopicAggregate()
        video_count = 0

        for index, item in enumerate(
            tqdm(videos, desc="Aggregating videos", disable=not self.show_progress)
        ):
            video = self.to_video_record(item, index)
            video_count += 1

            for topic_id in video.topic_ids:
                topic = accumulator.get(topic_id)
                if topic is None:
                    topic = accumulator[topic_id] = TopicAggregate(id=topic_id)

                topic.add_video(video)

                # best may already be this topic, then it just grew in place
                leader = self.pick_best(best, topic)
                if leader is not best:
                    self.logger.debug(
                        f"...topic '{leader.id}' leads with {leader.views_count} views"
                    )
                    best = leader

        self.logger.info(
            f"Done aggregating {video_count} videos into {len(accumulator)} topics, "
            f"most viewed: '{best.id}'."
        )
        return accumulator, best

    @staticmethod
    def pick_best(best: TopicAggregate, candidate: TopicAggregate) -> TopicAggregate:
        """The zero baseline always yields to a real topic, otherwise only a strictly higher views count wins."""
        if best.is_empty or candidate.views_count > best.views_count:
            return candidate
        return best

    @staticmethod
    def to_video_record(item: Any, index: int) -> VideoRecord:
        if isinstance(item, VideoRecord):
            return item

        if not isinstance(item, dict):
            raise InvalidRecord(
                f"expected an object, got {type(item).__name__}", index=index
            )

        try:
            return VideoRecord.model_validate(item)
        except ValidationError as e:
            raise InvalidRecord(str(e), index=index) from e

    @staticmethod
    def merge(
        partials: Iterable[Dict[TopicId, TopicAggregate]]
    ) -> Dict[TopicId, TopicAggregate]:
        """
        Merges topic maps computed on separate shards of the videos.

        Counters are summed and video ids united. The partial maps are left untouched.
        """
        merged: Dict[TopicId, TopicAggregate] = {}
        for partial in partials:
            for topic_id, topic in partial.items():
                if topic_id in merged:
                    merged[topic_id] = merged[topic_id] + topic
                else:
                    merged[topic_id] = topic.model_copy(deep=True)

        return merged

    @classmethod
    def best_of(cls, accumulator: Dict[TopicId, TopicAggregate]) -> TopicAggregate:
        """Most viewed topic of an accumulator, ties go to the topic inserted first."""
        best = TopicAggregate()
        for topic in accumulator.values():
            best = cls.pick_best(best, topic)
        return best
