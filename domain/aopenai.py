import openai

from domain.prompts import SYSTEM_PROMPT


DEFAULT_MODEL = "gpt-4o"
MAX_TOKENS = 1000
TEMPERATURE = 1.0


async def quick_chat(
    msg: str,
    *,
    openai_client: openai.AsyncClient | None = None,
    system: str = SYSTEM_PROMPT,
    model: str | None = None,
    temperature: float = TEMPERATURE,
    max_tokens: int = MAX_TOKENS,
) -> str:
    openai_client = openai.AsyncClient() if openai_client is None else openai_client
    model = DEFAULT_MODEL if model is None else model
    resp = await openai_client.chat.completions.create(
        model=model,
        messages=[
            {"role": "system", "content": system},
            {"role": "user", "content": msg},
        ],
        temperature=temperature,
        max_tokens=max_tokens,
    )
    ans = resp.choices[0].message.content or ""
    return ans.strip()
