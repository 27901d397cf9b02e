"""Simulated AI risk scorer — keyword heuristics over vendor descriptions.

Stands in for a remote model call: the text is matched against fixed keyword
sets, the match counts pick a risk band, and the four sub-metrics are drawn
around that band's base score. All randomness comes from an injected
``random.Random`` so callers can pin the output.
"""

from __future__ import annotations

import asyncio
import random
from dataclasses import dataclass

import structlog

from vendor_risk.models.vendor import AssessmentResult, RiskLevel, VendorMetrics, round_half_up

logger = structlog.get_logger()


POSITIVE_KEYWORDS = [
    "excellent",
    "strong",
    "robust",
    "exemplary",
    "outstanding",
    "proven",
    "certified",
    "compliant",
    "reliable",
    "quality",
    "professional",
    "experienced",
]

NEGATIVE_KEYWORDS = [
    "concern",
    "issue",
    "problem",
    "violation",
    "incident",
    "delay",
    "dispute",
    "litigation",
    "bankruptcy",
    "default",
    "failure",
    "inadequate",
    "poor",
]

CRITICAL_KEYWORDS = [
    "bankruptcy",
    "insolvency",
    "lawsuit",
    "criminal",
    "fraud",
    "shutdown",
    "catastrophic",
    "fatal",
    "suspended",
    "revoked",
]

# (floor, width) of the base score draw for each level
BASE_SCORE_BANDS = {
    RiskLevel.CRITICAL: (35.0, 20.0),
    RiskLevel.HIGH: (50.0, 20.0),
    RiskLevel.MEDIUM: (65.0, 20.0),
    RiskLevel.LOW: (80.0, 15.0),
}

# Total spread of the per-metric perturbation, centred on zero
METRIC_VARIANCE = 15.0

# negative must exceed positive by more than this to reach High
HIGH_RISK_MARGIN = 2

SUMMARY_TEMPLATES = {
    RiskLevel.LOW: [
        (
            "Vendor demonstrates excellent financial stability with strong cash reserves and low "
            "debt ratios. Safety record is exemplary with no major incidents in the past 24 months. "
            "Project delivery consistently meets or exceeds expectations with 95%+ on-time "
            "completion rate. All compliance documentation is current and complete."
        ),
        (
            "Outstanding operational track record with robust financial health indicators. "
            "Proactive safety culture with industry-leading metrics. Consistently delivers "
            "high-quality work within budget and schedule constraints. Maintains all required "
            "certifications and insurance coverage."
        ),
        (
            "Strong financial position with consistent profitability and healthy working capital. "
            "Exceptional safety performance with comprehensive training programs. Proven track "
            "record of successful project completions. Full compliance with all regulatory "
            "requirements."
        ),
    ],
    RiskLevel.MEDIUM: [
        (
            "Vendor shows generally stable financial position with some minor cash flow "
            "fluctuations. Safety record is acceptable with a few minor infractions requiring "
            "corrective action. Project performance is satisfactory but has experienced occasional "
            "delays. Compliance documentation is mostly current with some pending updates."
        ),
        (
            "Moderate financial health with recent expansion impacting short-term liquidity. "
            "Safety metrics are within acceptable range but show room for improvement. Work "
            "quality is generally good though administrative processes need strengthening. Most "
            "compliance requirements are met with minor gaps."
        ),
        (
            "Financial indicators show mixed signals with some areas of concern requiring "
            "monitoring. Safety record includes minor incidents that have been addressed. Project "
            "delivery is adequate but lacks consistency. Compliance status is generally acceptable "
            "with some documentation delays."
        ),
    ],
    RiskLevel.HIGH: [
        (
            "Vendor exhibits concerning financial indicators including elevated debt levels and "
            "strained cash flow. Safety record shows multiple infractions and incidents requiring "
            "immediate attention. Project performance has been inconsistent with several delays "
            "and quality issues. Compliance gaps exist in multiple areas."
        ),
        (
            "Significant financial stress evident with liquidity concerns and delayed payments to "
            "suppliers. Safety culture appears weak with recurring violations and inadequate "
            "corrective actions. Recent projects have experienced substantial delays and cost "
            "overruns. Several compliance deficiencies need urgent remediation."
        ),
        (
            "Financial health is deteriorating with concerning debt-to-equity ratios and declining "
            "profitability. Safety incidents have increased in frequency and severity. Project "
            "execution has been problematic with quality and schedule issues. Compliance "
            "documentation is incomplete or outdated."
        ),
    ],
    RiskLevel.CRITICAL: [
        (
            "Vendor faces severe financial distress with potential insolvency risk. Critical "
            "safety violations have occurred with inadequate response. Multiple project failures "
            "and contract disputes. Major compliance violations with regulatory exposure."
        ),
        (
            "Extreme financial instability with ongoing legal proceedings and creditor actions. "
            "Serious safety incidents with potential regulatory sanctions. Consistent failure to "
            "meet contractual obligations. Widespread compliance failures across multiple domains."
        ),
        (
            "Imminent financial collapse with bankruptcy proceedings likely. Catastrophic safety "
            "record with worker injuries and regulatory shutdowns. Complete breakdown in project "
            "delivery capabilities. Systemic compliance failures with legal ramifications."
        ),
    ],
}


@dataclass(frozen=True)
class KeywordCounts:
    """Number of distinct keywords from each set found in the text."""

    positive: int
    negative: int
    critical: int


def count_keywords(text: str) -> KeywordCounts:
    """Count keyword hits in already-lowercased text.

    Matching is plain substring containment, so "delays" hits "delay" and
    each keyword counts at most once however often it appears.
    """
    return KeywordCounts(
        positive=sum(1 for kw in POSITIVE_KEYWORDS if kw in text),
        negative=sum(1 for kw in NEGATIVE_KEYWORDS if kw in text),
        critical=sum(1 for kw in CRITICAL_KEYWORDS if kw in text),
    )


def classify_risk(counts: KeywordCounts) -> RiskLevel:
    """Map keyword counts to a risk level. First matching rule wins."""
    if counts.critical > 0:
        return RiskLevel.CRITICAL
    if counts.negative > counts.positive + HIGH_RISK_MARGIN:
        return RiskLevel.HIGH
    if counts.negative > counts.positive:
        return RiskLevel.MEDIUM
    return RiskLevel.LOW


class RiskScorer:
    """Keyword-driven vendor risk assessment with simulated latency.

    Args:
        rng: Random source for score draws, variance and template choice.
            Defaults to a fresh ``random.Random()``.
        latency: ``(min_seconds, max_seconds)`` band for the artificial delay
            in ``assess``. ``(0, 0)`` disables the delay.
    """

    def __init__(
        self,
        rng: random.Random | None = None,
        latency: tuple[float, float] = (0.8, 1.5),
    ) -> None:
        low, high = latency
        if low < 0 or high < low:
            raise ValueError(f"Invalid latency band: {latency!r}")
        self.rng = rng if rng is not None else random.Random()
        self.latency = (low, high)

    def score(self, description: str, history_data: str = "") -> AssessmentResult:
        """Assess the combined text synchronously."""
        text = f"{description} {history_data}".lower()
        counts = count_keywords(text)
        risk_level = classify_risk(counts)

        floor, width = BASE_SCORE_BANDS[risk_level]
        base_score = floor + self.rng.random() * width

        # Draw order is part of the contract: financial, safety, performance, compliance
        metrics = VendorMetrics(
            financial_health=self._perturb(base_score),
            safety_record=self._perturb(base_score),
            project_performance=self._perturb(base_score),
            compliance=self._perturb(base_score),
        )

        templates = SUMMARY_TEMPLATES[risk_level]
        summary = templates[int(self.rng.random() * len(templates))]

        return AssessmentResult(
            risk_level=risk_level,
            overall_score=metrics.weighted_score(),
            metrics=metrics,
            summary=summary,
        )

    async def assess(self, name: str, description: str, history_data: str = "") -> AssessmentResult:
        """Assess a vendor after the simulated model latency.

        The name is not scored; it only identifies the vendor in logs.
        Cancelling the awaiting task discards the result.
        """
        delay = self._draw_latency()
        if delay > 0:
            await asyncio.sleep(delay)

        result = self.score(description, history_data)
        logger.info(
            "vendor_assessed",
            vendor_name=name,
            risk_level=result.risk_level.value,
            overall_score=result.overall_score,
            latency_ms=round(delay * 1000, 2),
        )
        return result

    def _perturb(self, base_score: float) -> int:
        value = base_score + (self.rng.random() - 0.5) * METRIC_VARIANCE
        return round_half_up(max(0.0, min(100.0, value)))

    def _draw_latency(self) -> float:
        low, high = self.latency
        if high == 0:
            return 0.0
        return self.rng.uniform(low, high)
