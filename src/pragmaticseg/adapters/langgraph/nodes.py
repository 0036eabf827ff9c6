"""LangGraph node factories for sentence segmentation."""

from langchain_core.runnables import RunnableLambda
from ...core.abc import Segmenter
from .state_keys import DOCUMENT_TEXT, SENTENCES, SENTENCE_COUNT

def make_segment_node(segmenter: Segmenter,
                      text_key: str = DOCUMENT_TEXT,
                      output_key: str = SENTENCES):
    """
    Create a LangGraph node that splits a state text field into sentences.

    Args:
        segmenter: Any object with ``segment(text) -> List[str]``
        text_key: State key containing the text to segment
        output_key: State key that receives the sentence list

    Returns:
        RunnableLambda: Node that adds the sentences and their count to state
    """
    def _segment(state):
        text = state.get(text_key, "") or ""
        sentences = segmenter.segment(text)
        return {output_key: sentences, SENTENCE_COUNT: len(sentences)}

    return RunnableLambda(_segment)
