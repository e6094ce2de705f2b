# server/bmi_calculator/services/calculator_session.py
import asyncio
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Optional

from bmi_calculator.utils.bmi import BmiResult, evaluate
from bmi_calculator.utils.measurements import Measurement, ValidationFailure, parse_measurement


class SessionState(str, Enum):
    IDLE = "idle"
    COMPUTING = "computing"
    READY = "ready"


@dataclass(frozen=True)
class SessionSnapshot:
    state: SessionState
    submission: int
    result: Optional[BmiResult]
    rejected: bool

    @property
    def submit_disabled(self) -> bool:
        return self.state is SessionState.COMPUTING


class CalculatorSession:
    """
    Ciclo de vida de un cálculo: idle -> computing -> ready.

    Cada envío incrementa el número de envío y cancela el temporizador
    pendiente. Un resultado sólo se publica si su número coincide con el
    último envío, así que nunca aparece un resultado viejo.
    """

    def __init__(
        self,
        delay: float = 0.8,
        on_event: Optional[Callable[[str, str], None]] = None,
        loop: Optional[asyncio.AbstractEventLoop] = None,
    ):
        if delay < 0:
            raise ValueError("delay debe ser >= 0")
        self.delay = delay
        self._on_event = on_event
        self._loop = loop
        self._submission = 0
        self._state = SessionState.IDLE
        self._result: Optional[BmiResult] = None
        self._rejected = False
        self._pending: Optional[asyncio.TimerHandle] = None

    @property
    def state(self) -> SessionState:
        return self._state

    @property
    def result(self) -> Optional[BmiResult]:
        return self._result

    def snapshot(self) -> SessionSnapshot:
        return SessionSnapshot(
            state=self._state,
            submission=self._submission,
            result=self._result,
            rejected=self._rejected,
        )

    def submit(self, weight_text: Optional[str], height_text: Optional[str]) -> SessionSnapshot:
        """
        Procesa un envío del formulario. Si la entrada es inválida limpia el
        resultado y marca el rechazo; si es válida programa el cálculo.
        """
        self._submission += 1
        submission = self._submission
        self._cancel_pending()
        self._rejected = False

        try:
            measurement = parse_measurement(weight_text, height_text)
        except ValidationFailure as e:
            self._result = None
            self._state = SessionState.IDLE
            self._rejected = True
            self._emit(f"Envío #{submission} rechazado: {e}", "WARNING")
            return self.snapshot()

        self._state = SessionState.COMPUTING
        self._emit(f"Envío #{submission} aceptado: peso={weight_text!r} altura={height_text!r}")
        if self.delay == 0:
            self._commit(submission, measurement)
        else:
            loop = self._loop or asyncio.get_running_loop()
            self._pending = loop.call_later(self.delay, self._commit, submission, measurement)
        return self.snapshot()

    def reset(self) -> SessionSnapshot:
        # Cancelar el temporizador basta; el número de envío no cambia
        self._cancel_pending()
        self._state = SessionState.IDLE
        self._result = None
        self._rejected = False
        return self.snapshot()

    def _commit(self, submission: int, measurement: Measurement) -> None:
        if submission != self._submission:
            self._emit(f"Envío #{submission} descartado, reemplazado por #{self._submission}")
            return
        self._pending = None
        self._result = evaluate(measurement)
        self._state = SessionState.READY
        self._emit(
            f"Envío #{submission} listo: IMC={self._result.value} "
            f"categoría={self._result.label or 'N/A'}"
        )

    def _cancel_pending(self) -> None:
        if self._pending is not None:
            self._pending.cancel()
            self._pending = None

    def _emit(self, message: str, level: str = "INFO") -> None:
        if self._on_event:
            self._on_event(message, level)
