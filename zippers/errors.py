class NotFound(IndexError):
    """
    The operation does not apply to the zipper's current shape.

    Raised for every precondition failure (empty focus, no parent, no
    sibling, leaf child) and never carries a distinguishing subkind.
    """
