JOIN_FAILED_REASON = 'Room code is invalid or the host has disconnected.'


class RoomError(Exception):
    """Base class for room registry errors."""


class RoomNotFound(RoomError):
    def __init__(self, code):
        self.code = code
        super().__init__(JOIN_FAILED_REASON)

    @property
    def reason(self) -> str:
        return JOIN_FAILED_REASON


class RoomCodeSpaceExhausted(RoomError):
    def __init__(self, capacity: int):
        self.capacity = capacity
        super().__init__(f'All {capacity} room codes are in use. Try again later.')
