""" Where did parsing stop? Pictures for humans at a console. """

import sys
from typing import Optional

from .interface import Success

MARGIN = ' >>> '

def stopping_point(text:str, result:Optional[Success], caption:str) -> str:
	"""
	Two lines: the text, then carets under whatever the parse left unconsumed.
	A failed parse (None) consumed nothing, so the carets start at the beginning.
	Tabs in the consumed part are echoed so that the carets stay lined up.
	"""
	position = 0 if result is None else result.position
	shown = text.rstrip()
	indent = ''.join('\t' if c == '\t' else ' ' for c in MARGIN + text[:position])
	carets = '^' * max(1, len(shown) - position)
	return "%s%s\n%s%s %s"%(MARGIN, shown, indent, carets, caption)

def complain(text:str, result:Optional[Success], message:str, caption:str):
	print(message, file=sys.stderr)
	print(stopping_point(text, result, caption), file=sys.stderr)
