"""Constants used throughout the Aurora autism assistant."""

SERVICE_NAME = "Aurora Autism Assistant"
SERVICE_VERSION = "1.0.0-beta"
BETA_NOTICE = "I am still in Beta, I can make mistakes."

# Terminal responses
OFF_TOPIC_MESSAGE = (
    "I appreciate your question, but this is not my area of expertise. "
    "I'm Aurora, and I'm specifically designed to provide information and support "
    "related to Autism Spectrum Disorder. For questions outside of autism, I'd "
    "recommend consulting with appropriate professionals or specialized resources."
)

ERROR_MESSAGE = (
    "I'm sorry, I'm experiencing some technical difficulties right now. As a Beta "
    "assistant, I can sometimes encounter issues. Please try rephrasing your question "
    "or try again in a moment. If you need immediate support, please consult with "
    "healthcare professionals or autism support organizations."
)

# Knowledge base composition
PROFESSIONAL_DISCLAIMER = (
    "**Please note:** This is general information only. Every individual with autism "
    "is unique, so please consult with qualified healthcare professionals, therapists, "
    "or educators for guidance tailored to your situation."
)

BETA_DISCLAIMER = (
    "*Aurora is in Beta and can make mistakes. Always verify important information "
    "with a professional.*"
)

GENERAL_GUIDANCE = (
    "Thank you for your question about autism. I don't have specific guidance on this "
    "topic in my knowledge base yet, but here are some good places to start:\n\n"
    "- Talk with your healthcare provider, a developmental pediatrician, or an autism "
    "specialist for personalized guidance\n"
    "- Autism Speaks: autismspeaks.org\n"
    "- Autism Society of America: autism-society.org\n"
    "- Autistic Self Advocacy Network: autisticadvocacy.org\n"
    "- National Autism Association: nationalautismassociation.org\n\n"
    "Every individual with autism is unique, so professional consultation is the best "
    "way to find strategies that fit your situation."
)

CRISIS_MESSAGE = (
    "If you're experiencing a crisis or emergency, please contact:\n\n"
    "- National Suicide Prevention Lifeline: 988\n"
    "- Crisis Text Line: Text HOME to 741741\n"
    "- Emergency Services: 911\n\n"
    "Your safety is the priority."
)
CRISIS_TERMS = ["crisis", "emergency", "suicide", "suicidal", "self-harm"]

# Feedback remediation texts, keyed by pattern tag
IMPROVEMENT_SUGGESTIONS: dict[str, str] = {
    "what_questions": "Provide clearer definitions and overviews for 'what' questions.",
    "how_questions": "Add more step-by-step, practical instructions for 'how' questions.",
    "why_questions": "Explain underlying reasons and research more thoroughly for 'why' questions.",
    "when_questions": "Include timelines and developmental milestones for 'when' questions.",
    "where_questions": "List concrete services, organizations and locations for 'where' questions.",
    "sensory_topics": "Expand sensory processing strategies with more specific, age-appropriate examples.",
    "communication_topics": "Add more detail on AAC options and speech-language support.",
    "behavior_topics": "Focus on understanding behavior triggers and positive support approaches.",
    "education_topics": "Provide more specific guidance on IEPs, 504 plans and classroom accommodations.",
    "therapy_topics": "Describe therapy options more evenly and explain how to find providers.",
    "sleep_topics": "Add practical bedtime routines and sleep hygiene strategies.",
    "social_topics": "Include more concrete social skills activities and peer support ideas.",
    "complex_questions": "Break complex answers into clearer sections with summaries.",
    "simple_questions": "Keep answers to short questions concise and direct.",
}
GENERIC_IMPROVEMENT = "Review this topic area for accuracy and helpfulness."

# Suggested topics offered to new visitors
SUGGESTED_TOPICS: list[dict] = [
    {
        "id": "early_signs",
        "title": "Early Signs & Diagnosis",
        "description": "Recognizing autism signs and the diagnosis process",
        "examples": [
            "What are early signs of autism in toddlers?",
            "How is autism diagnosed?",
            "When should I be concerned about development?",
        ],
    },
    {
        "id": "school_support",
        "title": "School Support",
        "description": "Educational accommodations and IEP guidance",
        "examples": [
            "How do I get an IEP for my child?",
            "What accommodations help in school?",
            "How to work with teachers on autism support?",
        ],
    },
    {
        "id": "daily_routines",
        "title": "Daily Routines",
        "description": "Managing daily activities and transitions",
        "examples": [
            "How to create good routines for autism?",
            "Managing transitions and changes",
            "Help with morning and bedtime routines",
        ],
    },
    {
        "id": "communication",
        "title": "Communication Tips",
        "description": "Supporting communication development",
        "examples": [
            "How to help nonverbal communication?",
            "What is AAC and how does it help?",
            "Improving conversation skills",
        ],
    },
    {
        "id": "sensory_issues",
        "title": "Sensory Issues",
        "description": "Managing sensory processing differences",
        "examples": [
            "How to handle sensory overload?",
            "Creating sensory-friendly environments",
            "What are sensory processing issues?",
        ],
    },
    {
        "id": "family_resources",
        "title": "Family Resources",
        "description": "Support for families and caregivers",
        "examples": [
            "Where to find autism support groups?",
            "How to get respite care?",
            "Resources for autism families",
        ],
    },
]

# Service description for info endpoints
SERVICE_INFO = {
    "name": "Aurora",
    "tagline": "Your autism support assistant",
    "version": SERVICE_VERSION,
    "status": "Beta - I can make mistakes",
    "purpose": "Specialized AI assistant for autism spectrum disorder information and support",
    "capabilities": [
        "Answer autism-related questions",
        "Provide evidence-based guidance",
        "Share credible resources and references",
        "Support families and individuals",
        "Redirect non-autism questions appropriately",
    ],
    "limitations": [
        "Cannot provide medical diagnosis",
        "General information only",
        "Beta version with potential errors",
        "Always recommend professional consultation for medical decisions",
    ],
    "scope": [
        "Diagnosis & Assessment",
        "Treatment & Interventions",
        "Daily Living & Support",
        "Educational Support",
        "Family & Caregiver Resources",
        "Adult Autism Support",
        "Legal Rights & Advocacy",
        "Funding & Insurance",
        "Communities & Resources",
    ],
    "contact": {
        "emergency": "For emergencies, contact 911 or local emergency services",
        "crisis": "Crisis Text Line: Text HOME to 741741",
        "suicide_prevention": "National Suicide Prevention Lifeline: 988",
    },
}

# Log previews
QUESTION_PREVIEW_LENGTH = 100
