class CutError(Exception):
    pass


class GraphTooSmall(CutError):
    pass


class DisconnectedGraph(CutError):
    pass


class UnknownVertex(CutError):
    pass
