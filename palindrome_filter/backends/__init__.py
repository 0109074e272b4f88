"""
Backend registry with automatic selection.

Priority order: Threads (nogil JIT, no start-up cost) > Numba prange > Processes
"""
from .base import FilterBackend
from .threads import ThreadBackend
from .processes import ProcessBackend
from .numba_parallel import NumbaBackend

BACKEND_NAMES = ('threads', 'processes', 'numba')


def list_backends():
    """List all backends with their status."""
    backends = []
    for name, backend in zip(BACKEND_NAMES, (ThreadBackend(), ProcessBackend(), NumbaBackend())):
        backends.append((name, backend.get_name(), backend.is_available()))
    return backends


def auto_select_backend(n_workers=None, use_numba=True) -> FilterBackend:
    """Auto-select the best available backend.

    Priority: Threads > Numba > Processes
    """
    candidates = [ThreadBackend(n_workers=n_workers, use_numba=use_numba)]
    if use_numba:
        candidates.append(NumbaBackend(n_threads=n_workers))
    candidates.append(ProcessBackend(n_workers=n_workers, use_numba=use_numba))

    for backend in candidates:
        if backend.is_available():
            return backend
    raise RuntimeError("No palindrome filtering backend is available")


def get_backend(name: str, n_workers=None, use_numba=True) -> FilterBackend:
    """Get a specific backend by name.

    Args:
        name: 'threads', 'processes', 'numba' or 'auto'
        n_workers: worker threads/processes (None -> CPU count)
        use_numba: JIT kernel toggle for the pool backends

    Returns:
        FilterBackend instance

    Raises:
        ValueError if the backend is unknown or not available
    """
    name = name.lower()

    if name == 'auto':
        return auto_select_backend(n_workers=n_workers, use_numba=use_numba)
    elif name == 'threads':
        backend = ThreadBackend(n_workers=n_workers, use_numba=use_numba)
    elif name == 'processes':
        backend = ProcessBackend(n_workers=n_workers, use_numba=use_numba)
    elif name == 'numba':
        if not use_numba:
            raise ValueError("Numba backend cannot run with the JIT disabled")
        backend = NumbaBackend(n_threads=n_workers)
    else:
        raise ValueError(f"Unknown backend: {name}. Choose from: {', '.join(BACKEND_NAMES)}")

    if not backend.is_available():
        raise ValueError(f"{backend.get_name()} backend not available")
    return backend
