"""
Default Content Module - Hardcoded fallbacks for every public section
Shown whenever a section cannot be loaded or has no rows yet,
and used as seed data for empty tables.
"""

import copy

DEFAULT_HERO = {
    'id': 'default-hero',
    'title': "Hi, I'm Your Name",
    'subtitle': 'Full Stack Developer',
    'description': 'I craft beautiful and functional web experiences that make a difference.',
    'cta_text': 'View My Work',
    'cta_link': '#projects',
    'availability_status': 'Available for work',
    'profile_image': None,
    'background_image': None,
}

DEFAULT_ABOUT = {
    'id': 'default-about',
    'title': 'About Me',
    'content': (
        'I am a passionate developer with experience in building modern web applications. '
        'I love creating beautiful, functional, and user-friendly experiences that solve '
        'real-world problems.'
    ),
    'image': None,
    'resume_url': None,
}

DEFAULT_CONTACT = {
    'id': 'default-contact',
    'email': 'hello@example.com',
    'phone': '',
    'location': '',
    'linkedin': 'https://linkedin.com',
    'github': 'https://github.com',
    'twitter': 'https://twitter.com',
    'portfolio_url': '',
}

DEFAULT_SKILLS = [
    {'id': 'default-skill-1', 'name': 'React', 'category': 'Frontend', 'proficiency': 90, 'icon': None, 'order_index': 1},
    {'id': 'default-skill-2', 'name': 'Next.js', 'category': 'Frontend', 'proficiency': 85, 'icon': None, 'order_index': 2},
    {'id': 'default-skill-3', 'name': 'TypeScript', 'category': 'Frontend', 'proficiency': 80, 'icon': None, 'order_index': 3},
    {'id': 'default-skill-4', 'name': 'Node.js', 'category': 'Backend', 'proficiency': 75, 'icon': None, 'order_index': 4},
    {'id': 'default-skill-5', 'name': 'PostgreSQL', 'category': 'Backend', 'proficiency': 70, 'icon': None, 'order_index': 5},
    {'id': 'default-skill-6', 'name': 'Git', 'category': 'Tools', 'proficiency': 85, 'icon': None, 'order_index': 6},
]

DEFAULT_EXPERIENCE = [
    {
        'id': 'default-experience-1',
        'company': 'Tech Company Inc.',
        'position': 'Senior Developer',
        'description': 'Led development of key features and mentored junior developers.',
        'start_date': '2022-01-01',
        'end_date': None,
        'is_current': True,
        'location': 'San Francisco, CA',
        'company_logo': None,
        'order_index': 1,
    },
    {
        'id': 'default-experience-2',
        'company': 'Startup XYZ',
        'position': 'Full Stack Developer',
        'description': 'Built scalable web applications using modern technologies.',
        'start_date': '2020-06-01',
        'end_date': '2021-12-31',
        'is_current': False,
        'location': 'Remote',
        'company_logo': None,
        'order_index': 2,
    },
]

DEFAULT_PROJECTS = [
    {
        'id': 'default-project-1',
        'title': 'E-Commerce Platform',
        'description': 'A full-featured online store with payment integration',
        'long_description': (
            'Built a complete e-commerce solution with product management, cart '
            'functionality, and secure payment processing.'
        ),
        'image': None,
        'video': None,
        'demo_url': 'https://example.com',
        'github_url': 'https://github.com',
        'technologies': ['React', 'Node.js', 'PostgreSQL', 'Stripe'],
        'featured': True,
        'order_index': 1,
    },
    {
        'id': 'default-project-2',
        'title': 'Task Management App',
        'description': 'Collaborative task tracking with real-time updates',
        'long_description': 'Developed a real-time task management application with team collaboration features.',
        'image': None,
        'video': None,
        'demo_url': 'https://example.com',
        'github_url': 'https://github.com',
        'technologies': ['Next.js', 'TypeScript', 'PostgreSQL'],
        'featured': False,
        'order_index': 2,
    },
]

DEFAULT_EDUCATION = [
    {
        'id': 'default-education-1',
        'institution': 'University of Technology',
        'degree': 'Bachelor of Science',
        'field_of_study': 'Computer Science',
        'start_date': '2016-09-01',
        'end_date': '2020-06-01',
        'is_current': False,
        'description': 'Focused on software engineering and web development',
        'logo': None,
        'order_index': 1,
    },
]

DEFAULT_ACHIEVEMENTS = [
    {
        'id': 'default-achievement-1',
        'title': 'Hackathon Finalist',
        'description': 'Selected for the grand finale of a national hackathon, competing among the top teams.',
        'icon': 'Trophy',
        'color': 'text-amber-400',
        'bg': 'bg-amber-400/10',
        'border': 'border-amber-400/20',
        'order_index': 1,
    },
    {
        'id': 'default-achievement-2',
        'title': '5 Star Problem Solver',
        'description': 'Achieved a 5-star rating for problem solving and algorithms.',
        'icon': 'Star',
        'color': 'text-yellow-400',
        'bg': 'bg-yellow-400/10',
        'border': 'border-yellow-400/20',
        'order_index': 2,
    },
    {
        'id': 'default-achievement-3',
        'title': '300+ Problems Solved',
        'description': 'Solved over 300 data structures and algorithms problems.',
        'icon': 'Award',
        'color': 'text-orange-400',
        'bg': 'bg-orange-400/10',
        'border': 'border-orange-400/20',
        'order_index': 3,
    },
]

DEFAULT_SECTIONS = {
    'hero': DEFAULT_HERO,
    'about': DEFAULT_ABOUT,
    'contact': DEFAULT_CONTACT,
    'skills': DEFAULT_SKILLS,
    'experience': DEFAULT_EXPERIENCE,
    'projects': DEFAULT_PROJECTS,
    'education': DEFAULT_EDUCATION,
    'achievements': DEFAULT_ACHIEVEMENTS,
}

# Empty structs used to seed the singleton editors when no row exists yet
EMPTY_SINGLETONS = {
    'hero': {
        'id': '', 'title': '', 'subtitle': '', 'description': '', 'cta_text': '',
        'cta_link': '', 'availability_status': 'Available for work',
        'profile_image': None, 'background_image': None,
    },
    'about': {'id': '', 'title': '', 'content': '', 'image': None, 'resume_url': ''},
    'contact': {
        'id': '', 'email': '', 'phone': '', 'location': '', 'linkedin': '',
        'github': '', 'twitter': '', 'portfolio_url': '',
    },
}


def get_default_section(name):
    """Return a fresh copy of the default content for a section"""
    return copy.deepcopy(DEFAULT_SECTIONS[name])


def get_empty_singleton(name):
    return copy.deepcopy(EMPTY_SINGLETONS[name])
