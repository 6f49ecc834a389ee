from fastapi import Request


async def get_json_body(request: Request) -> dict:
    """
    Request body as a dict, or {} when it is empty, not JSON or not an object.
    Bad input turns into defaults downstream instead of a 422.
    """
    try:
        payload = await request.json()
    except ValueError:
        return {}
    return payload if isinstance(payload, dict) else {}
