"""LangGraph node factories for phraseline integration."""

from langchain_core.runnables import RunnableLambda
from ...runtime.parser import Parser
from .state_keys import *

def make_segment_node(parser: Parser, text_key: str = INPUT_TEXT):
    """
    Create a LangGraph node that splits a state text field into phrase chunks.

    Args:
        parser: Configured Parser instance
        text_key: State key containing the text to segment

    Returns:
        RunnableLambda: Node that adds chunks and boundaries to state
    """
    def _segment(state):
        text = state.get(text_key, "") or ""
        result = parser.segment(text)
        return {
            PHRASELINE_CHUNKS: result.chunks,
            PHRASELINE_BOUNDARIES: result.boundaries,
        }

    return RunnableLambda(_segment)
