import logging
import logging.config

from .rng import *
from .gen import *
from .generators import *
from .clauses import *
from .asserts import *
from .runner import *
from .pset import *
from .error_types import PropcheckError, InvalidRunParameters, AssertionErrors
from .config import CONFIG, Config

def enableLogging(debug=False):
    logging.config.dictConfig({
        'version': 1,
        'disable_existing_loggers': False,

        'formatters': {
            'default': {
                'format': '[{asctime}] {levelname}, {name}: {message}',
                'datefmt': '%Y/%m/%d %H:%M:%S',
                'style': '{',
            },
        },

        'handlers': {
            'stdout': {
                'class': 'logging.StreamHandler',
                'formatter': 'default',
                'stream': 'ext://sys.stdout',
            },
        },

        'root': {
            'level': logging.DEBUG if debug else logging.INFO,
            'handlers': ['stdout'],
        },
    })
