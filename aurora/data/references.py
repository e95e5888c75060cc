"""Credible sources and citations for autism information."""

from ..models.reference import Credibility, Reference, ReferenceSummary, ReferenceType


def _ref(
    ref_id: str,
    title: str,
    organization: str,
    url: str,
    ref_type: ReferenceType,
    credibility: Credibility,
    description: str,
    keywords: list[str],
) -> Reference:
    return Reference(
        id=ref_id,
        title=title,
        organization=organization,
        url=url,
        type=ref_type,
        credibility=credibility,
        description=description,
        keywords=tuple(keywords),
    )


REFERENCES: dict[str, Reference] = {
    ref.id: ref
    for ref in [
        # Government and medical organizations
        _ref(
            "cdc_autism",
            "Autism Spectrum Disorder Information",
            "Centers for Disease Control and Prevention",
            "https://www.cdc.gov/autism/",
            ReferenceType.GOVERNMENT,
            Credibility.HIGHEST,
            "Official CDC information on autism spectrum disorder",
            ["diagnosis", "prevalence", "research", "early", "signs"],
        ),
        _ref(
            "nih_autism",
            "Autism Research and Information",
            "National Institute of Mental Health",
            "https://www.nimh.nih.gov/health/topics/autism-spectrum-disorders",
            ReferenceType.GOVERNMENT,
            Credibility.HIGHEST,
            "NIH research and clinical information on autism",
            ["research", "treatment", "diagnosis", "clinical"],
        ),
        # Major autism organizations
        _ref(
            "autism_speaks_main",
            "Autism Speaks Resource Library",
            "Autism Speaks",
            "https://www.autismspeaks.org/",
            ReferenceType.NONPROFIT,
            Credibility.HIGH,
            "Comprehensive autism resources and advocacy",
            ["advocacy", "family", "support", "resources", "awareness"],
        ),
        _ref(
            "autism_speaks_sensory",
            "Sensory Issues and Autism",
            "Autism Speaks",
            "https://www.autismspeaks.org/sensory-issues",
            ReferenceType.NONPROFIT,
            Credibility.HIGH,
            "Guide to sensory processing in autism",
            ["sensory", "processing", "overstimulation", "environment"],
        ),
        _ref(
            "national_autism_center",
            "Evidence-Based Practice Guidelines",
            "National Autism Center",
            "https://www.nationalautismcenter.org/",
            ReferenceType.NONPROFIT,
            Credibility.HIGHEST,
            "Research-based autism intervention guidelines",
            ["evidence", "treatment", "intervention", "research", "guidelines"],
        ),
        _ref(
            "autistic_self_advocacy",
            "Autistic Self Advocacy Network",
            "ASAN",
            "https://autisticadvocacy.org/",
            ReferenceType.ADVOCACY,
            Credibility.HIGH,
            "Self-advocacy and rights information by autistic people",
            ["self-advocacy", "rights", "community", "autistic", "perspective"],
        ),
        # Education
        _ref(
            "idea_autism_guidelines",
            "IDEA and Autism Educational Services",
            "U.S. Department of Education",
            "https://sites.ed.gov/idea/",
            ReferenceType.GOVERNMENT,
            Credibility.HIGHEST,
            "Special education law and autism services",
            ["education", "iep", "504", "school", "legal", "rights"],
        ),
        _ref(
            "center_autism_education",
            "Center for Autism and Related Disabilities",
            "University of Florida",
            "https://card.ufl.edu/",
            ReferenceType.ACADEMIC,
            Credibility.HIGH,
            "Educational support and training resources",
            ["education", "training", "support", "academic", "school"],
        ),
        # Therapy and intervention
        _ref(
            "applied_behavior_analysis",
            "ABA Evidence Base",
            "Behavior Analyst Certification Board",
            "https://www.bacb.com/",
            ReferenceType.PROFESSIONAL,
            Credibility.HIGH,
            "Applied behavior analysis certification and standards",
            ["aba", "behavior", "therapy", "intervention", "evidence"],
        ),
        _ref(
            "speech_pathology_autism",
            "Autism and Communication",
            "American Speech-Language-Hearing Association",
            "https://www.asha.org/practice-portal/clinical-topics/autism/",
            ReferenceType.PROFESSIONAL,
            Credibility.HIGHEST,
            "Speech-language pathology practice guidelines for autism",
            ["communication", "speech", "language", "therapy", "aac"],
        ),
        _ref(
            "occupational_therapy_autism",
            "Occupational Therapy and Autism",
            "American Occupational Therapy Association",
            "https://www.aota.org/",
            ReferenceType.PROFESSIONAL,
            Credibility.HIGH,
            "Occupational therapy interventions for autism",
            ["occupational", "therapy", "sensory", "daily", "living", "skills"],
        ),
        # Adult services
        _ref(
            "autism_employment_network",
            "Autism at Work",
            "Autism Speaks",
            "https://www.autismspeaks.org/autism-work",
            ReferenceType.NONPROFIT,
            Credibility.HIGH,
            "Employment resources for adults with autism",
            ["employment", "adult", "work", "job", "career", "workplace"],
        ),
        _ref(
            "adult_autism_services",
            "Adult Autism Services Guide",
            "Organization for Autism Research",
            "https://researchautism.org/",
            ReferenceType.NONPROFIT,
            Credibility.HIGH,
            "Research and resources for adult autism support",
            ["adult", "services", "independence", "support", "transition"],
        ),
        # Family support
        _ref(
            "family_support_autism",
            "Family Support Resources",
            "Autism Society of America",
            "https://www.autism-society.org/",
            ReferenceType.NONPROFIT,
            Credibility.HIGH,
            "Family support and local chapter resources",
            ["family", "support", "parent", "sibling", "local", "chapter"],
        ),
        _ref(
            "sibling_support_project",
            "Sibling Support Project",
            "The Arc",
            "https://www.siblingsupport.org/",
            ReferenceType.NONPROFIT,
            Credibility.HIGH,
            "Support for siblings of people with disabilities",
            ["sibling", "family", "support", "disability", "brother", "sister"],
        ),
        # Funding and insurance
        _ref(
            "autism_insurance_advocacy",
            "Insurance Coverage for Autism",
            "Autism Speaks",
            "https://www.autismspeaks.org/insurance",
            ReferenceType.NONPROFIT,
            Credibility.HIGH,
            "Insurance advocacy and coverage information",
            ["insurance", "coverage", "advocacy", "funding", "benefits"],
        ),
        _ref(
            "medicaid_autism_services",
            "Medicaid Autism Services",
            "Centers for Medicare & Medicaid Services",
            "https://www.medicaid.gov/",
            ReferenceType.GOVERNMENT,
            Credibility.HIGHEST,
            "Medicaid coverage for autism services",
            ["medicaid", "government", "funding", "services", "waiver"],
        ),
        # Crisis resources
        _ref(
            "crisis_text_line",
            "Crisis Text Line",
            "Crisis Text Line",
            "https://www.crisistextline.org/",
            ReferenceType.CRISIS,
            Credibility.HIGHEST,
            "24/7 crisis support via text",
            ["crisis", "emergency", "mental", "health", "support", "text"],
        ),
        _ref(
            "suicide_prevention",
            "National Suicide Prevention Lifeline",
            "SAMHSA",
            "https://suicidepreventionlifeline.org/",
            ReferenceType.CRISIS,
            Credibility.HIGHEST,
            "24/7 suicide prevention and crisis support",
            ["suicide", "prevention", "crisis", "mental", "health", "emergency"],
        ),
        _ref(
            "autism_speaks_crisis",
            "Autism Crisis Resources",
            "Autism Speaks",
            "https://www.autismspeaks.org/autism-safety-project",
            ReferenceType.NONPROFIT,
            Credibility.HIGH,
            "Crisis and safety resources for autism community",
            ["crisis", "safety", "emergency", "autism", "wandering", "elopement"],
        ),
        # Research and evidence
        _ref(
            "cochrane_autism",
            "Cochrane Autism Reviews",
            "Cochrane Library",
            "https://www.cochranelibrary.com/",
            ReferenceType.ACADEMIC,
            Credibility.HIGHEST,
            "Systematic reviews of autism interventions",
            ["research", "evidence", "systematic", "review", "cochrane"],
        ),
        _ref(
            "journal_autism",
            "Journal of Autism and Developmental Disorders",
            "Springer",
            "https://link.springer.com/journal/10803",
            ReferenceType.ACADEMIC,
            Credibility.HIGHEST,
            "Peer-reviewed autism research journal",
            ["research", "journal", "peer-reviewed", "academic", "study"],
        ),
    ]
}

DEFAULT_REFERENCE_IDS = [
    "autism_speaks_main",
    "cdc_autism",
    "national_autism_center",
    "autistic_self_advocacy",
]

EMERGENCY_REFERENCE_IDS = [
    "crisis_text_line",
    "suicide_prevention",
    "autism_speaks_crisis",
]


class ReferenceCatalog:
    """Read-only access to the reference catalog and its fixed sets."""

    def __init__(self, references: dict[str, Reference] | None = None) -> None:
        self._references = dict(REFERENCES if references is None else references)

    def __iter__(self):
        return iter(self._references.values())

    def __len__(self) -> int:
        return len(self._references)

    def get(self, ref_id: str) -> Reference | None:
        return self._references.get(ref_id)

    def get_default_references(self) -> list[ReferenceSummary]:
        """General-purpose high-credibility sources for in-domain answers."""
        return self._summaries(DEFAULT_REFERENCE_IDS)

    def get_emergency_references(self) -> list[ReferenceSummary]:
        """Crisis lines, used only when the pipeline fails."""
        return self._summaries(EMERGENCY_REFERENCE_IDS)

    def _summaries(self, ref_ids: list[str]) -> list[ReferenceSummary]:
        return [
            self._references[ref_id].summary()
            for ref_id in ref_ids
            if ref_id in self._references
        ]
