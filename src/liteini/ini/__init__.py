# -*- encoding: utf-8 -*-
# @File   : __init__.py
# @Time   : 2025/06/02 22:00:12
# @Author : liteini developers

from .model import IniSection, IniDocument
from .parser import IniParser, normalize, strip_comment, trim
