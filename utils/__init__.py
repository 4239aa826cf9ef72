# DEPENDENCIES
from .text_processor import TextUnit
from .text_processor import TextProcessor
from .validators import TextValidator
from .logger import LegalLensLogger
from .validators import InputTooShortError


__all__ = ['TextUnit',
           'TextProcessor',
           'TextValidator',
           'LegalLensLogger',
           'InputTooShortError',
          ]
