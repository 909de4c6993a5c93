"""
Manual answering prompt.

Defines the prompt template that restricts the model to the retrieved
manual excerpts and fixes the refusal wording.

Dependencies: langchain_core.prompts
System role: Prompt template for answering behavior
"""

from langchain_core.prompts import ChatPromptTemplate

REFUSAL_MESSAGE = "I'm sorry, the answer is not available in the provided content."

SYSTEM_PROMPT = f"""You are a precise and factual assistant.
Use only the information from the provided manuals to answer the user's question.
Do not assume or make up any details.
Maintain original units, numbers, and terminology.

If the answer is not in the provided content, simply respond:
"{REFUSAL_MESSAGE}"
"""

ANSWER_PROMPT = ChatPromptTemplate.from_messages([
    ("system", SYSTEM_PROMPT),
    ("human", """Manual Excerpts:
{context}


Question: {question}
Answer:"""),
])
