from eventable.config.settings import Settings
from eventable.logging.logger import Log


def configure(settings: Settings | None = None) -> Settings:
    """Entry point: load settings -> configure logging."""
    if settings is None:
        settings = Settings()
    Log.configure(settings.log_level, event_key=settings.event_metadata_key)
    Log.debug(f"Event logging configured for {settings.app_env}")
    return settings
