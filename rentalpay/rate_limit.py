from flask_limiter import Limiter
from flask_limiter.util import get_remote_address
from rentalpay.config import RATE_LIMIT, RATELIMIT_STORAGE_URI


limiter = Limiter(
    key_func=get_remote_address,
    default_limits=[RATE_LIMIT],
    storage_uri=RATELIMIT_STORAGE_URI
)
