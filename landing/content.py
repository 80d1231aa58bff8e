"""
Static marketing copy for the LessonRush landing page.

Pain points are stored verbatim on waitlist entries, so changing the
``pain`` text of an existing item splits answers in exports.
"""

# Problem-Agitation-Solution pairs for course creators
CREATOR_PAIN_POINTS = [
    {
        'pain': 'I spend weeks setting up my course platform instead of creating content',
        'solution': 'Launch-ready course platform in under 5 minutes with zero technical setup',
        'icon': 'clock',
    },
    {
        'pain': 'Technical setup costs eat into my course profits',
        'solution': 'All-in-one solution that eliminates expensive developers and monthly tool subscriptions',
        'icon': 'dollar',
    },
    {
        'pain': 'I lose students during complicated enrollment processes',
        'solution': 'Streamlined, conversion-optimized enrollment that maximizes student sign-ups',
        'icon': 'users',
    },
    {
        'pain': 'Managing payments, emails, and content delivery is overwhelming',
        'solution': 'Automated systems handle everything while you focus on teaching and growing',
        'icon': 'target',
    },
]

# Core MVP features, all still planned
CORE_FEATURES = [
    {
        'title': '5-Minute Course Setup',
        'description': 'Upload content, set pricing, go live. No coding, no complicated configurations.',
        'icon': 'zap',
        'status': 'planned',
    },
    {
        'title': 'Built-in Payment Processing',
        'description': 'Secure payments, automatic tax handling, instant payouts to your account.',
        'icon': 'card',
        'status': 'planned',
    },
    {
        'title': 'Student Progress Tracking',
        'description': 'Quizzes, certificates, progress tracking that boost completion rates.',
        'icon': 'chart',
        'status': 'planned',
    },
    {
        'title': 'Content Drip System',
        'description': 'Automatically release lessons to keep students engaged and coming back.',
        'icon': 'play',
        'status': 'planned',
    },
]

TRUST_SIGNALS = ['No spam, ever', 'Be the first to know', 'Early bird pricing']

CTA_PERKS = ['Early bird pricing', 'Beta access', 'Shape the product', 'No spam, ever']


def pain_point_choices():
    """Choices for form fields: the pain text is both value and label."""
    return [(point['pain'], point['pain']) for point in CREATOR_PAIN_POINTS]
