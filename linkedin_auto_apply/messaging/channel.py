"""Request/response channel to the background coordinator"""


class ChannelUnavailable(Exception):
    """The coordinator can no longer be reached; the run must abort"""


class MessageChannel:
    """
    Delivers {action, data} requests to a handler and returns its response dict.

    Once invalidated (host runtime gone) every send raises ChannelUnavailable.
    """

    def __init__(self, handler):
        self._handler = handler
        self._valid = True

    @property
    def available(self):
        return self._valid

    def invalidate(self):
        self._valid = False

    def send(self, action, data=None):
        if not self._valid:
            raise ChannelUnavailable(f"channel invalidated, cannot send {action!r}")
        response = self._handler(action, data)
        if not isinstance(response, dict):
            return {"success": False, "message": "No response"}
        return response
