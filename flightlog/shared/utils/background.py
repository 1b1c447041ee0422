"""
Registro de envios en segundo plano (fire-and-forget).

Los envios a la hoja central se lanzan como tareas asyncio sin esperar su
resultado. Se guarda una referencia a cada tarea mientras esta viva para que
el recolector no la cancele y para poder esperarlas al cerrar la aplicacion.
"""
import asyncio
from typing import Awaitable, List, Set

from loguru import logger

_pending: Set[asyncio.Task] = set()


def fire_and_forget(coro: Awaitable, *, label: str = "envio") -> asyncio.Task:
    """
    Programa `coro` en el event loop actual y retorna inmediatamente.
    Cualquier excepcion se registra y se descarta.
    """
    task = asyncio.ensure_future(coro)
    _pending.add(task)

    def _done(t: asyncio.Task) -> None:
        _pending.discard(t)
        if t.cancelled():
            logger.warning(f"{label}: tarea cancelada")
            return
        exc = t.exception()
        if exc is not None:
            logger.error(f"{label}: fallo no controlado en segundo plano: {exc}")

    task.add_done_callback(_done)
    return task


def _live_tasks(loop: asyncio.AbstractEventLoop) -> List[asyncio.Task]:
    return [t for t in _pending if not t.done() and t.get_loop() is loop]


def pending_count() -> int:
    """Numero de envios aun en curso en el event loop actual."""
    try:
        loop = asyncio.get_running_loop()
    except RuntimeError:
        return 0
    return len(_live_tasks(loop))


async def drain_pending(timeout: float = 10.0) -> int:
    """
    Espera a que terminen los envios en curso (usado en el cierre).

    Returns:
        Numero de tareas que se esperaron.
    """
    tasks = _live_tasks(asyncio.get_running_loop())
    if not tasks:
        return 0
    done, not_done = await asyncio.wait(tasks, timeout=timeout)
    if not_done:
        logger.warning(f"{len(not_done)} envio(s) siguen en curso tras {timeout}s; se abandonan")
    return len(done)
