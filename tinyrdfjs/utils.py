import logging

import structlog

# Routed through stdlib logging so nothing is emitted until an application
# enables the ``tinyrdfjs`` logger.
log = structlog.wrap_logger(
    logging.getLogger('tinyrdfjs'),
    wrapper_class=structlog.stdlib.BoundLogger,
    processors=[
        structlog.stdlib.filter_by_level,
        structlog.processors.KeyValueRenderer(key_order=['event']),
    ],
)
