from ..results import Ok, Result

API_INFO = "This is the API of a Hackernews Clone"


async def resolve_info() -> Result[str]:
    return Ok(API_INFO)
