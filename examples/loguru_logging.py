import logging

from loguru import logger as log

import cordui


# I kind of prefer loguru and have therefore implemented its intercept handler to have it log over python default logging
class InterceptHandler(logging.Handler):
    def emit(self, record):
        # Get corresponding Loguru level if it exists
        try:
            level = log.level(record.levelname).name
        except ValueError:
            level = record.levelno

        # Find caller from where originated the logged message
        frame, depth = logging.currentframe(), 2
        while frame.f_code.co_filename == logging.__file__:
            frame = frame.f_back
            depth += 1

        log.opt(depth=depth, exception=record.exc_info).log(level, record.getMessage())


cordui.setup_logging(handler=InterceptHandler(), level=logging.DEBUG, root=False)

# Component types the library does not know yet are kept as a plain Component and logged
component = cordui.create_component({'type': 17, 'components': [], 'accent_color': 0x5865F2})
log.info(f'Got {component!r} with raw data {component.data}')

builder = cordui.create_component_builder({'type': 17, 'components': []})
log.info(f'Got {builder!r}')
