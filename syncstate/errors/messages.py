def create_write_forbidden_message(slot_name: str, namespace: str) -> str:
    return (
        f'Observer write is disabled by the host. Slot "{slot_name}" has channel '
        f'namespace "{namespace}". Set allow_observer_write=True when registering '
        "the slot to enable observer writes."
    )


def create_write_rejected_message(slot_name: str, namespace: str) -> str:
    return (
        f'Observer write value failed validation. Slot "{slot_name}" has channel '
        f'namespace "{namespace}". Check that the value satisfies the slot transform.'
    )


INVALID_INITIAL_VALUE_WARNING_MESSAGE = (
    "Initial value contains content that cannot be transmitted (callables, "
    "tuples, sets, builtin subclasses, out of range ints, non-finite floats, "
    "non-str keys or reference cycles). Observers will not be able to "
    "receive it."
)
