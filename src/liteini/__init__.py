# -*- encoding: utf-8 -*-
# @File   : __init__.py
# @Time   : 2025/06/02 21:05:37
# @Author : liteini developers

import logging

from .ini import IniDocument, IniParser, IniSection, normalize
from .reader import IniReader
from .sources import (
    FileSource, IterableSource, StreamSource, StringSource, as_source
)

__all__ = [
    'IniReader', 'IniDocument', 'IniSection', 'IniParser', 'normalize',
    'FileSource', 'StringSource', 'StreamSource', 'IterableSource',
    'as_source'
]

logging.basicConfig(level=logging.INFO,
                    format='[%(asctime)s] %(levelname)s: %(message)s')
