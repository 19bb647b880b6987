class OutcomeError(Exception):
    pass


class InvalidPlayerStateError(OutcomeError):
    pass


class AmbiguousTeamsError(InvalidPlayerStateError):
    pass


class ReplayFormatError(OutcomeError):
    pass
