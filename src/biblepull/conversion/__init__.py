"""Markup transcoding, labelling and Markdown assembly."""

from .assembler import OutputAssembler
from .labels import crossref_label, footnote_label, label, labels
from .markdown import CopyrightConverter
from .rules import MarkerLabeller, RewriteRule, apply_rules
from .transcoder import MarkupTranscoder

__all__ = [
    "CopyrightConverter",
    "MarkerLabeller",
    "MarkupTranscoder",
    "OutputAssembler",
    "RewriteRule",
    "apply_rules",
    "crossref_label",
    "footnote_label",
    "label",
    "labels",
]
