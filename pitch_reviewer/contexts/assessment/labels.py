"""
Locale-keyed text tables for the Assessment context.

All user-facing strings produced by the pipeline live here, one Labels
instance per Locale. Logic modules look text up by field, never by
branching on the locale.
"""

from dataclasses import dataclass
from typing import Optional, Tuple

from pitch_reviewer.contexts.intake.language import Locale, resolve_locale


@dataclass(frozen=True)
class EnrichmentHints:
    """Heuristic bullets appended to a matching segment's lanes."""

    missing: Optional[str] = None
    importance: Optional[str] = None
    value: Optional[str] = None


@dataclass(frozen=True)
class FactCardText:
    """
    Text for one key-fact card.

    Attributes:
        placeholder: fromDeck fallback when the segment has no evidence
        strong: Evaluation when the threshold is met
        weak: Evaluation otherwise
        benchmark: Comparable benchmark sentence
    """

    placeholder: str
    strong: str
    weak: str
    benchmark: str


@dataclass(frozen=True)
class GapText:
    """Display label and rationale for an expected review category."""

    section: str
    why: str


@dataclass(frozen=True)
class Labels:
    """Every pipeline string for one locale."""

    # Enrichment, keyed by lowercase category keyword (checked in this order)
    enrichment: Tuple[Tuple[str, EnrichmentHints], ...]

    # Key facts
    valuation: FactCardText
    traction: FactCardText
    team: FactCardText
    market: FactCardText
    problem: FactCardText
    ask_not_specified: str
    verdict_attractive: str
    verdict_early: str

    # Structural gaps, keyed by expected-category id
    gaps: Tuple[Tuple[str, GapText], ...]

    # Report headings
    title: str
    card_titles: Tuple[str, ...]
    summary: str
    key_facts: str
    segments: str
    missing_header: str
    sections_missing: str
    investors: str
    from_deck: str
    evaluation: str
    benchmark: str
    ask: str
    verdict: str
    match: str
    investor: str
    country: str
    focus: str
    stage: str
    check: str
    why_match: str
    more_investors: str

    def gap_text(self, category_id: str) -> GapText:
        return dict(self.gaps)[category_id]

    def more_investors_text(self, count: int) -> str:
        """Overflow line shown under the top investors (e.g., "+3 more in Pitch Expert")."""
        return self.more_investors.format(count=count)


EN_LABELS = Labels(
    enrichment=(
        (
            "market",
            EnrichmentHints(
                missing="SOM by country (formula & assumptions)",
                importance="Guides GTM and round sizing",
                value="Bottom-up table: (#customers × ARPU × penetration)",
            ),
        ),
        (
            "business",
            EnrichmentHints(
                missing="Channel CAC & payback",
                value="LTV/CAC model with sensitivity",
            ),
        ),
        (
            "traction",
            EnrichmentHints(
                missing="Cohorts & M2/M3 retention",
                importance="Evidence of PMF & efficiency",
                value="Retention & funnel chart",
            ),
        ),
        (
            "team",
            EnrichmentHints(
                missing="Senior commercial role (quota carrier)",
                value="Hiring plan for 2–3 key roles",
            ),
        ),
        (
            "problem",
            EnrichmentHints(
                missing="Quantify pain frequency/cost",
                value="Survey N/% and top use-cases",
            ),
        ),
    ),
    valuation=FactCardText(
        placeholder="Sizing mentioned",
        strong="In range for Pre-seed given traction+team.",
        weak="High vs benchmarks for maturity.",
        benchmark="LATAM Pre-seed: US$0.5–3.5M post; checks US$100–750k.",
    ),
    traction=FactCardText(
        placeholder="Early signals",
        strong="Positive; measure retention and CAC payback.",
        weak="Insufficient; focus on cohorts.",
        benchmark="LATAM Seed: M3 retention >30% B2C / >70% logo B2B (indicative).",
    ),
    team=FactCardText(
        placeholder="Founding team",
        strong="Strong for stage.",
        weak="Incomplete: cover key gaps.",
        benchmark="Pre-seed: 2–3 complementary founders; senior GTM desirable.",
    ),
    market=FactCardText(
        placeholder="TAM indicated",
        strong="Sizing credible.",
        weak="Weak sizing; build bottom-up SOM.",
        benchmark="Expected: cited sources and SOM by country/vertical.",
    ),
    problem=FactCardText(
        placeholder="Pain evidenced",
        strong="Validated pain.",
        weak="Quantify frequency/cost.",
        benchmark="Bench: surveys N>=100 / recorded interviews.",
    ),
    ask_not_specified="Not specified",
    verdict_attractive="Attractive for early funds: adoption signals, clear pain.",
    verdict_early="Early: prioritize traction and problem size.",
    gaps=(
        ("competition", GapText("Competition", "Competitive map gives context & moats.")),
        ("go_to_market", GapText("Go-to-Market (GTM)", "Acquisition strategy impacts CAC & growth.")),
        ("financials", GapText("Financials", "Financial model reflects assumptions & runway.")),
        ("product", GapText("Product / Technology", "Architecture/roadmap reduce technical risk.")),
        ("regulatory", GapText("Regulatory/Compliance", "Compliance key in regulated sectors.")),
    ),
    title="LATAM Pitch Reviewer",
    card_titles=("Valuation", "Traction", "Team", "Market", "Problem"),
    summary="Summary",
    key_facts="Key facts evaluation",
    segments="Segmented review",
    missing_header="What’s missing",
    sections_missing="Sections / key info missing",
    investors="Potential investors (top 3)",
    from_deck="From the deck",
    evaluation="Evaluation",
    benchmark="Comparable benchmark",
    ask="Ask",
    verdict="Investor interest",
    match="Match",
    investor="Investor",
    country="Geo",
    focus="Focus",
    stage="Stage",
    check="Ticket",
    why_match="Why a good match",
    more_investors="+{count} more in Pitch Expert",
)

ES_LABELS = Labels(
    enrichment=(
        (
            "market",
            EnrichmentHints(
                missing="SOM por país (fórmula y supuestos)",
                importance="Guía el go-to-market y sizing de ronda",
                value="Tabla bottom-up: (#clientes x ARPU x penetración)",
            ),
        ),
        (
            "business",
            EnrichmentHints(
                missing="CAC por canal y payback",
                value="Modelo LTV/CAC con sensibilidad",
            ),
        ),
        (
            "traction",
            EnrichmentHints(
                missing="Cohortes y retención M2/M3",
                importance="Evidencia de PMF y eficiencia",
                value="Gráfico de retención y embudo",
            ),
        ),
        (
            "team",
            EnrichmentHints(
                missing="Rol comercial senior (quota-carrier)",
                value="Plan de contratación 2-3 roles clave",
            ),
        ),
        (
            "problem",
            EnrichmentHints(
                missing="Cuantificar frecuencia/costo del dolor",
                value="Encuesta N/% y casos de uso top",
            ),
        ),
    ),
    valuation=FactCardText(
        placeholder="Tamaño de mercado mencionado",
        strong="En rango para Pre-seed dada tracción+equipo.",
        weak="Alta vs benchmarks por madurez.",
        benchmark="Pre-seed LATAM: US$0.5–3.5M post; cheques US$100–750k.",
    ),
    traction=FactCardText(
        placeholder="Señales tempranas",
        strong="Positiva; medir retención y payback CAC.",
        weak="Insuficiente; enfocar en cohortes.",
        benchmark="Seed LATAM: retención M3>30% B2C / M3>70% logo B2B (referencial).",
    ),
    team=FactCardText(
        placeholder="Equipo fundacional",
        strong="Sólido para la etapa.",
        weak="Incompleto: cubrir gaps clave.",
        benchmark="Pre-seed: 2–3 founders complementarios; 1 senior GTM deseable.",
    ),
    market=FactCardText(
        placeholder="TAM indicado",
        strong="Sizing creíble.",
        weak="Sizing débil; construir SOM bottom-up.",
        benchmark="Esperado: fuentes citadas y SOM por país/vertical.",
    ),
    problem=FactCardText(
        placeholder="Dolor evidenciado",
        strong="Dolor validado.",
        weak="Cuantificar frecuencia/costo.",
        benchmark="Bench: encuestas con N>=100 / entrevistas grabadas.",
    ),
    ask_not_specified="No especificado",
    verdict_attractive="Atractivo para fondos con foco early: señales de adopción y dolor claro.",
    verdict_early="Aún temprano: priorizar tracción y tamaño del problema.",
    gaps=(
        ("competition", GapText("Competencia", "Mapa de competidores da contexto y defensas.")),
        (
            "go_to_market",
            GapText("Go-to-Market (GTM)", "Estrategia de adquisición impacta CAC y crecimiento."),
        ),
        ("financials", GapText("Proyecciones financieras", "Modelo financiero refleja supuestos y runway.")),
        ("product", GapText("Producto / Tecnología", "Arquitectura/roadmap reducen riesgo técnico.")),
        ("regulatory", GapText("Regulatorio/Compliance", "Cumplimiento clave en sectores regulados.")),
    ),
    title="Revisor de Pitches LATAM",
    card_titles=("Valoración", "Tracción", "Equipo", "Mercado", "Problema"),
    summary="Resumen",
    key_facts="Evaluación de aspectos clave",
    segments="Revisión por secciones",
    missing_header="Qué falta",
    sections_missing="Secciones / información clave faltante",
    investors="Inversionistas potenciales (top 3)",
    from_deck="Del deck",
    evaluation="Evaluación",
    benchmark="Benchmark comparable",
    ask="Ronda (Ask)",
    verdict="Interés inversor",
    match="Match",
    investor="Inversionista",
    country="Geo",
    focus="Enfoque",
    stage="Etapa",
    check="Ticket",
    why_match="Por qué es buen fit",
    more_investors="+{count} más en Pitch Expert",
)

LABELS = {
    Locale.EN: EN_LABELS,
    Locale.ES: ES_LABELS,
}


def get_labels(locale) -> Labels:
    """Labels for any locale token (resolved with resolve_locale)."""
    return LABELS[resolve_locale(locale)]
