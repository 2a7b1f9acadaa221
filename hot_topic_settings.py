from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class HotTopicSettings(BaseSettings):
    """
    Settings of the hot topic finder. Each field can be overridden by an env.
    variable prefixed with HOT_TOPIC_ (e.g. HOT_TOPIC_VIDEOS_FILE).
    """

    model_config = SettingsConfigDict(env_prefix="HOT_TOPIC_", extra="ignore")

    videos_file: str = Field(
        default="videos.json",
        min_length=1,
        title="Path of the JSON file listing the videos to aggregate.",
    )

    verbose: bool = Field(
        default=False,
        title="Set to True to log messages useful for debugging the aggregation.",
    )

    show_progress: bool = Field(
        default=False,
        title="Display a progress bar while aggregating videos.",
    )

    fail_on_empty: bool = Field(
        default=False,
        title="Treat a dataset without any topic as an error instead of reporting 'No topic found'.",
    )
