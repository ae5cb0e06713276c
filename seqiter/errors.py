import inspect
import threading


class EvaluationError(Exception):
    """Raised when a user function fails while evaluating an element."""


class IllegalStateError(RuntimeError):
    """Raised when an operation is called at the wrong time.

    Typically :meth:`remove` without a preceding :meth:`next` or two
    removals in a row.
    """


class UnsupportedOperationError(NotImplementedError):
    """Raised by iterators which do not provide an optional operation."""


class ConcurrentModificationError(RuntimeError):
    """Raised when a collection is modified behind an iterator's back."""


# Settings --------------------------------------------------------------------

class ErrorConfig(threading.local):
    """Per-thread error propagation mode of the seqiter callbacks."""

    def __init__(self):
        super().__init__()
        self.passthrough = False


error_config = ErrorConfig()


def seterr(evaluation=None):
    """Get or set how errors raised by user callbacks reach the caller.

    Predicates, transforms and classifiers are called lazily, while an
    iterator is consumed, often far from the line which built it.

    Args:
        evaluation (Optional[str]):

            - `'wrap'` (default): raise :class:`EvaluationError` naming the
              failed element and the place where the iterator was created,
              with the original error as its cause.
            - `'passthrough'`: re-raise the original error untouched, which
              is handier under a debugger.
            - `None`: leave the setting unchanged.

    The setting is local to the calling thread.

    Returns:
        str: the current setting.
    """
    if evaluation not in (None, 'wrap', 'passthrough'):
        raise ValueError("evaluation must be 'wrap' or 'passthrough'")

    if evaluation is not None:
        error_config.passthrough = evaluation == 'passthrough'

    return 'passthrough' if error_config.passthrough else 'wrap'


# Helpers ---------------------------------------------------------------------

def unindent(lines):
    """Strip the indentation shared by source `lines` (`None` gives [])."""
    if not lines:
        return []

    margin = min(len(line) - len(line.lstrip(" \t")) for line in lines)
    return [line[margin:] for line in lines]


def format_stack(skip=1):
    """Describe the call site where an iterator is being built.

    Iterators which call user functions store this text at construction,
    :func:`evaluate` appends it to the message of :class:`EvaluationError`
    so that a failure during consumption points back to the pipeline
    definition. Frames are listed outermost first, in the traceback
    format; the `skip` innermost frames besides this one (typically the
    iterator's `__init__`) are left out.
    """
    out = []
    for frame in reversed(inspect.stack()[skip + 1:]):
        out.append("  File \"{}\", line {}, in {}\n".format(
            frame.filename, frame.lineno, frame.function))
        out.extend("    " + line for line in unindent(frame.code_context))

    return "".join(out)


def evaluate(owner, func, value):
    """Call a user function on an element on behalf of an iterator.

    Errors are wrapped into :class:`EvaluationError` unless the
    evaluation mode is `'passthrough'`, `owner.stack` is expected to
    hold the creation stack of the iterator.
    """
    try:
        return func(value)

    except Exception as cause:
        if seterr() == 'passthrough' or isinstance(cause, EvaluationError):
            raise
        else:
            msg = "Failed to evaluate {!r} in {} created at:\n{}".format(
                value, owner.__class__.__name__, owner.stack)
            raise EvaluationError(msg) from cause
