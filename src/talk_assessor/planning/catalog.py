"""Fixed curriculum tables used by the improvement planner."""

from types import MappingProxyType

from talk_assessor.models.level import ProficiencyLevel

L = ProficiencyLevel

EXERCISES = MappingProxyType({
    "fluency": (
        "Practice speaking at a consistent pace using a metronome",
        "Record yourself and identify filler word patterns",
        "Practice tongue twisters to improve articulation",
        "Read aloud for 10 minutes daily to build speaking stamina",
        "Use breathing exercises to control speech rhythm",
    ),
    "pronunciation": (
        "Practice minimal pairs (ship/sheep, bit/beat)",
        "Record and compare your pronunciation with native speakers",
        "Use pronunciation apps like ELSA or Speechling",
        "Practice stress patterns in multi-syllable words",
        "Work on intonation patterns for questions and statements",
    ),
    "vocabulary": (
        "Learn 5-10 new words daily and use them in sentences",
        "Practice synonyms and antonyms",
        "Read diverse materials to encounter new vocabulary",
        "Keep a vocabulary journal with context and usage",
        "Practice describing objects without using common words",
    ),
    "grammar": (
        "Practice specific grammar points with exercises",
        "Write sentences using different tenses",
        "Study sentence structure patterns",
        "Practice subject-verb agreement",
        "Work on article usage (a/an/the)",
    ),
    "coherence": (
        "Practice organizing thoughts before speaking",
        "Use transition words and phrases",
        "Practice telling stories with clear structure",
        "Work on topic sentences and supporting details",
        "Practice summarizing information clearly",
    ),
})

RESOURCES = MappingProxyType({
    "fluency": (
        "TED Talks for listening to natural speech patterns",
        "Podcasts with clear speakers",
        "Speech rate control apps",
        "Breathing and relaxation techniques",
    ),
    "pronunciation": (
        "YouTube pronunciation channels",
        "IPA (International Phonetic Alphabet) guides",
        "Pronunciation dictionaries",
        "Speech therapy apps",
    ),
    "vocabulary": (
        "Vocabulary building apps (Quizlet, Memrise)",
        "Academic word lists",
        "Contextual reading materials",
        "Word of the day subscriptions",
    ),
    "grammar": (
        "Grammar practice websites (Grammarly, Purdue OWL)",
        "Grammar workbooks",
        "Online grammar courses",
        "Language exchange partners",
    ),
    "coherence": (
        "Public speaking courses",
        "Storytelling workshops",
        "Logic and reasoning exercises",
        "Debate clubs or discussion groups",
    ),
})

LEVEL_TIMELINES = MappingProxyType({
    L.BEGINNER: "3-6 months",
    L.LOWER_INTERMEDIATE: "6-12 months",
    L.INTERMEDIATE: "12-18 months",
    L.UPPER_INTERMEDIATE: "18-24 months",
    L.ADVANCED: "Ongoing",
})

LEVEL_GOALS = MappingProxyType({
    L.BEGINNER: (
        "Speak clearly with basic pronunciation",
        "Use simple but correct grammar",
        "Build basic vocabulary (500-1000 words)",
        "Speak in complete sentences",
    ),
    L.LOWER_INTERMEDIATE: (
        "Reduce filler words significantly",
        "Expand vocabulary to 2000-3000 words",
        "Improve grammar accuracy",
        "Speak with more confidence",
    ),
    L.INTERMEDIATE: (
        "Use advanced vocabulary appropriately",
        "Master complex grammar structures",
        "Organize thoughts logically",
        "Speak naturally and fluently",
    ),
    L.UPPER_INTERMEDIATE: (
        "Achieve near-native fluency",
        "Master academic vocabulary",
        "Express ideas precisely and eloquently",
        "Handle complex topics confidently",
    ),
    L.ADVANCED: (
        "Refine pronunciation to near-native level",
        "Master specialized vocabulary for your field",
        "Excel in public speaking and presentations",
        "Serve as a language model for others",
    ),
})

CHECKPOINTS = MappingProxyType({
    L.BEGINNER: (
        "Can pronounce basic sounds clearly",
        "Uses simple present tense correctly",
        "Has basic vocabulary of 500+ words",
        "Speaks in complete sentences",
    ),
    L.LOWER_INTERMEDIATE: (
        "Reduced filler words by 50%",
        "Vocabulary expanded to 2000+ words",
        "Uses past and future tenses",
        "Speaks with more confidence",
    ),
    L.INTERMEDIATE: (
        "Uses complex sentences naturally",
        "Vocabulary of 3000+ words",
        "Good grammar accuracy",
        "Organizes thoughts logically",
    ),
    L.UPPER_INTERMEDIATE: (
        "Near-native fluency",
        "Academic vocabulary mastery",
        "Precise expression",
        "Handles complex topics",
    ),
    L.ADVANCED: (
        "Native-like pronunciation",
        "Specialized vocabulary",
        "Excellent public speaking",
        "Can teach others",
    ),
})

# Cumulative months of study typically needed to reach each level
LEVEL_MONTHS = MappingProxyType({
    L.BEGINNER: 6,
    L.LOWER_INTERMEDIATE: 12,
    L.INTERMEDIATE: 18,
    L.UPPER_INTERMEDIATE: 24,
    L.ADVANCED: 36,
})

TARGET_SCORES = MappingProxyType({
    L.BEGINNER: 1.5,
    L.LOWER_INTERMEDIATE: 2.5,
    L.INTERMEDIATE: 3.5,
    L.UPPER_INTERMEDIATE: 4.5,
    L.ADVANCED: 5.0,
})

MOTIVATION_TIPS = MappingProxyType({
    L.BEGINNER: (
        "Every expert was once a beginner. Focus on progress, not perfection.",
        "Practice for just 10 minutes daily - consistency beats intensity.",
        "Celebrate small wins like pronouncing a new word correctly.",
        "Remember that making mistakes is how we learn and improve.",
    ),
    L.LOWER_INTERMEDIATE: (
        "You're building a strong foundation. Keep pushing through challenges.",
        "Your vocabulary is growing - notice how many more words you know now.",
        "Fluency comes with practice. Trust the process.",
        "Compare yourself to who you were yesterday, not to others.",
    ),
    L.INTERMEDIATE: (
        "You're becoming more confident. Let that confidence show in your speech.",
        "Complex grammar is within your reach. Break it down into smaller parts.",
        "Your communication skills are opening new opportunities.",
        "You're developing your unique voice in English.",
    ),
    L.UPPER_INTERMEDIATE: (
        "You're approaching advanced levels. Your hard work is paying off.",
        "Precision in expression sets you apart. Focus on the details.",
        "You can handle complex topics. Trust your abilities.",
        "You're becoming a role model for other learners.",
    ),
    L.ADVANCED: (
        "You're refining excellence. Every detail matters now.",
        "Your skills can help others. Consider mentoring or teaching.",
        "You're mastering the nuances that make speech truly natural.",
        "You've achieved what many aspire to. Keep pushing your boundaries.",
    ),
})

PRACTICE_QUESTIONS: tuple[str, ...] = (
    "Tell me about your typical day from morning to evening.",
    "What does your work or study routine look like?",
    "Describe your hobbies and interests.",
    "What are your goals for the next few years?",
    "Tell me about a recent challenge you faced and how you handled it.",
    "What's your favorite way to spend your free time?",
    "Describe your family and living situation.",
    "What motivates you in life?",
)
