"""
Answer prompt.

System instruction restricting the model to the retrieved context, with the
fallback sentence it must use when the context has no answer.

Dependencies: langchain_core.prompts
System role: Prompt template for answer synthesis
"""

from langchain_core.messages import BaseMessage
from langchain_core.prompts import ChatPromptTemplate

FALLBACK_SENTENCE = "I'm not sure, let me connect you to a human agent."

SYSTEM_PROMPT = """You are an insurance policy assistant. Use the following context to answer the user's question. If the answer is not in the context, say "{fallback}"

Respond with a single JSON object.

Context:
{context}"""

ANSWER_PROMPT = ChatPromptTemplate.from_messages([
    ("system", SYSTEM_PROMPT),
    ("human", "{question}"),
])


def build_answer_messages(context: str, question: str) -> list[BaseMessage]:
    """
    Render the answer prompt.

    Args:
        context: Retrieved chunk texts joined by newlines
        question: User question

    Returns:
        list[BaseMessage]: System and human messages
    """
    return ANSWER_PROMPT.format_messages(
        fallback=FALLBACK_SENTENCE,
        context=context,
        question=question,
    )
