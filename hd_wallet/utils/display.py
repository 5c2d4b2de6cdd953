"""Display helpers for the presentation layer"""

MASK_CHAR = "•"


def mask_secret(secret, visible=False):
    """Return the secret, or a same-length mask when not visible"""
    if visible:
        return secret
    return MASK_CHAR * len(secret)
