import logging.config

# Track listings go to stdout, so log lines stay on stderr
logging.config.dictConfig(
    {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {"plain": {"format": "%(levelname)s: %(message)s"}},
        "handlers": {
            "stderr": {
                "class": "logging.StreamHandler",
                "formatter": "plain",
                "stream": "ext://sys.stderr",
            }
        },
        "loggers": {"cueplus": {"level": "WARNING", "handlers": ["stderr"]}},
    }
)
