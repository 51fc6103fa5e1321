from __future__ import annotations

import logging
import time
from typing import Callable, Iterable, Sequence as Seq

from seqlab.config import HarnessConfig
from seqlab.interfaces import ActionSource, Sequence, SequenceEngine
from seqlab.keys import generate_keys
from seqlab.metrics import Clock, TrialTimer, mean_ms, mean_ns, overhead, ratio
from seqlab.models import Action, GroupKey, PeerKey, Series
from seqlab.sweep import actions_for_exponent, log_sweep_points

logger = logging.getLogger("seqlab.runner")

KeyFactory = Callable[[], tuple[PeerKey, GroupKey]]

LENGTH_LABEL = "Length"
SIZE_LABEL = "Action size (bytes)"


def category_label(action_size: int) -> str:
    return f"{action_size}-byte actions"


class ExperimentRunner:
    """Runs the timing and space experiments against a sequence engine.

    Key material is generated once per experiment call, before any timed
    section. One action is generated per category and appended repeatedly,
    so payload generation never shows up in the measurements.
    """

    def __init__(
        self,
        engine: SequenceEngine,
        action_source: ActionSource,
        config: HarnessConfig | None = None,
        key_factory: KeyFactory = generate_keys,
        clock: Clock = time.perf_counter_ns,
    ) -> None:
        self.engine = engine
        self.action_source = action_source
        self.config = config or HarnessConfig()
        self._key_factory = key_factory
        self._clock = clock

    @property
    def repetitions(self) -> int:
        return self.config.repetitions

    def _fill(
        self, seq: Sequence, action: Action, count: int, peer_key: PeerKey, group_key: GroupKey
    ) -> Sequence:
        group = self.config.group
        for _ in range(count):
            seq.append(action, peer_key, group, group_key)
        return seq

    def _build(
        self, action: Action, count: int, peer_key: PeerKey, group_key: GroupKey
    ) -> Sequence:
        return self._fill(self.engine.new(), action, count, peer_key, group_key)

    # --- experiment kinds ---------------------------------------------------

    def generation_time(self, action_sizes: Iterable[int], lengths: Seq[int]) -> list[Series]:
        """Average wall time (ms) to build a fresh sequence of each length."""
        peer_key, group_key = self._key_factory()
        out: list[Series] = []
        for action_size in action_sizes:
            action = self.action_source.generate(action_size)
            rows = []
            for length in lengths:
                logger.info("Generation for %d %d-byte actions", length, action_size)
                samples = []
                for _ in range(self.repetitions):
                    seq = self.engine.new()
                    with TrialTimer(self._clock) as timer:
                        self._fill(seq, action, length, peer_key, group_key)
                    samples.append(timer.elapsed_ns)
                rows.append((length, mean_ms(samples)))
            out.append(Series(LENGTH_LABEL, category_label(action_size), tuple(rows)))
        return out

    def verification_time(self, action_sizes: Iterable[int], lengths: Seq[int]) -> list[Series]:
        """Average wall time (ms) of ``verify`` on an already built sequence.

        The sequence is built once per length, untimed, and verified
        ``repetitions`` times; verification is read-only so the repeated
        calls measure the same work.
        """
        peer_key, group_key = self._key_factory()
        out: list[Series] = []
        for action_size in action_sizes:
            action = self.action_source.generate(action_size)
            rows = []
            for length in lengths:
                logger.info("Verification for %d %d-byte actions", length, action_size)
                seq = self._build(action, length, peer_key, group_key)
                samples = []
                for _ in range(self.repetitions):
                    with TrialTimer(self._clock) as timer:
                        ok = seq.verify()
                    samples.append(timer.elapsed_ns)
                    if not ok:
                        logger.warning(
                            "Sequence of %d %d-byte actions failed verification",
                            length,
                            action_size,
                        )
                rows.append((length, mean_ms(samples)))
            out.append(Series(LENGTH_LABEL, category_label(action_size), tuple(rows)))
        return out

    def space_usage(self, action_sizes: Iterable[int], lengths: Seq[int]) -> list[Series]:
        """Serialized size in bytes; deterministic, so measured once."""
        peer_key, group_key = self._key_factory()
        out: list[Series] = []
        for action_size in action_sizes:
            action = self.action_source.generate(action_size)
            rows = []
            for length in lengths:
                logger.info("Space requirements for %d %d-byte actions", length, action_size)
                seq = self._build(action, length, peer_key, group_key)
                rows.append((length, len(seq.serialize())))
            out.append(Series(LENGTH_LABEL, category_label(action_size), tuple(rows)))
        return out

    def overhead_ratio(self, action_nb: int, units: Iterable[int], max_exp: int) -> Series:
        """Storage overhead of ``action_nb`` actions for each swept action size."""
        peer_key, group_key = self._key_factory()
        rows = []
        for _, action_size in log_sweep_points(units, max_exp):
            logger.info("Space overhead for %d %d-byte actions", action_nb, action_size)
            action = self.action_source.generate(action_size)
            seq = self._build(action, action_nb, peer_key, group_key)
            size = len(seq.serialize())
            rows.append((action_size, overhead(size, action_size, action_nb)))
        return Series(SIZE_LABEL, "Overhead", tuple(rows))

    def write_verify_ratio(self, units: Iterable[int], max_exp: int) -> list[Series]:
        """Mean write and verify times (ns) and their ratio per action size.

        Returns three series sharing the same keys: write time, verify time
        and ``write / verify``.
        """
        peer_key, group_key = self._key_factory()
        write_rows, verify_rows, ratio_rows = [], [], []
        for exp, action_size in log_sweep_points(units, max_exp):
            action_nb = actions_for_exponent(exp)
            logger.info("Ratio Write/Verif for %d %d-byte actions", action_nb, action_size)
            action = self.action_source.generate(action_size)
            write_samples, verify_samples = [], []
            for _ in range(self.repetitions):
                seq = self.engine.new()
                with TrialTimer(self._clock) as write_timer:
                    self._fill(seq, action, action_nb, peer_key, group_key)
                with TrialTimer(self._clock) as verify_timer:
                    ok = seq.verify()
                write_samples.append(write_timer.elapsed_ns)
                verify_samples.append(verify_timer.elapsed_ns)
                if not ok:
                    logger.warning(
                        "Sequence of %d %d-byte actions failed verification",
                        action_nb,
                        action_size,
                    )
            write_time = mean_ns(write_samples)
            verify_time = mean_ns(verify_samples)
            write_rows.append((action_size, write_time))
            verify_rows.append((action_size, verify_time))
            ratio_rows.append((action_size, ratio(write_time, verify_time)))
        return [
            Series(SIZE_LABEL, "Write time", tuple(write_rows)),
            Series(SIZE_LABEL, "Verif time", tuple(verify_rows)),
            Series(SIZE_LABEL, "Ratio write-verif", tuple(ratio_rows)),
        ]
