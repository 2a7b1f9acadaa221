import json
import logging

import pytest

from models import VideoRecord


@pytest.fixture
def logger():
    return logging.getLogger("hot_topic_finder.tests")


@pytest.fixture
def make_video():
    def _make_video(id, views=0, likes=0, dislikes=0, topics=()):
        return VideoRecord(
            id=id,
            views_count=views,
            likes_count=likes,
            dislikes_count=dislikes,
            topic_ids=list(topics),
        )

    return _make_video


@pytest.fixture
def write_videos(tmp_path):
    def _write_videos(videos, name="videos.json"):
        path = tmp_path / name
        path.write_text(json.dumps(videos), encoding="utf-8")
        return path

    return _write_videos
