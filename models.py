from extensions import db
from datetime import datetime
from flask_login import UserMixin
from sqlalchemy import JSON
import uuid


# Custom JSON type that uses JSONB on PostgreSQL and JSON/Text on SQLite
class SafeJSON(db.TypeDecorator):
    impl = JSON
    cache_ok = True

    def load_dialect_impl(self, dialect):
        if dialect.name == 'postgresql':
            from sqlalchemy.dialects.postgresql import JSONB
            return dialect.type_descriptor(JSONB())
        else:
            return dialect.type_descriptor(JSON())


def _uuid():
    return str(uuid.uuid4())


# Singleton sections: at most one row each, overwritten on save

class HeroSection(db.Model):
    __tablename__ = 'hero_section'
    id = db.Column(db.String(36), primary_key=True, default=_uuid)
    title = db.Column(db.String(255), nullable=False, default='')
    subtitle = db.Column(db.String(255), default='')
    description = db.Column(db.Text, default='')
    cta_text = db.Column(db.String(100), default='')
    cta_link = db.Column(db.String(500), default='')
    availability_status = db.Column(db.String(100), default='Available for work')
    profile_image = db.Column(db.String(500))
    background_image = db.Column(db.String(500))
    updated_at = db.Column(db.DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)


class AboutSection(db.Model):
    __tablename__ = 'about_section'
    id = db.Column(db.String(36), primary_key=True, default=_uuid)
    title = db.Column(db.String(255), nullable=False, default='')
    content = db.Column(db.Text, default='')
    image = db.Column(db.String(500))
    resume_url = db.Column(db.String(500))
    updated_at = db.Column(db.DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)


class ContactInfo(db.Model):
    __tablename__ = 'contact_info'
    id = db.Column(db.String(36), primary_key=True, default=_uuid)
    email = db.Column(db.String(255), nullable=False, default='')
    phone = db.Column(db.String(50))
    location = db.Column(db.String(255))
    linkedin = db.Column(db.String(500))
    github = db.Column(db.String(500))
    twitter = db.Column(db.String(500))
    portfolio_url = db.Column(db.String(500))
    updated_at = db.Column(db.DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)


# List entities: ordered by an explicit order_index

class Skill(db.Model):
    __tablename__ = 'skills'
    id = db.Column(db.String(36), primary_key=True, default=_uuid)
    name = db.Column(db.String(255), nullable=False)
    category = db.Column(db.String(100), default='Backend')
    proficiency = db.Column(db.Integer, default=80)
    icon = db.Column(db.String(100))
    order_index = db.Column(db.Integer, default=0, nullable=False)
    created_at = db.Column(db.DateTime, default=datetime.utcnow)


class Experience(db.Model):
    __tablename__ = 'experiences'
    id = db.Column(db.String(36), primary_key=True, default=_uuid)
    company = db.Column(db.String(255), nullable=False)
    position = db.Column(db.String(255), nullable=False)
    description = db.Column(db.Text, default='')
    start_date = db.Column(db.Date)
    end_date = db.Column(db.Date)  # NULL while is_current
    is_current = db.Column(db.Boolean, default=False)
    location = db.Column(db.String(255), default='')
    company_logo = db.Column(db.String(500))
    order_index = db.Column(db.Integer, default=0, nullable=False)
    created_at = db.Column(db.DateTime, default=datetime.utcnow)


class Project(db.Model):
    __tablename__ = 'projects'
    id = db.Column(db.String(36), primary_key=True, default=_uuid)
    title = db.Column(db.String(255), nullable=False)
    description = db.Column(db.Text, default='')
    long_description = db.Column(db.Text, default='')
    image = db.Column(db.String(500))
    video = db.Column(db.String(500))
    demo_url = db.Column(db.String(500))
    github_url = db.Column(db.String(500))
    technologies = db.Column(SafeJSON, default=list)
    featured = db.Column(db.Boolean, default=False)
    order_index = db.Column(db.Integer, default=0, nullable=False)
    created_at = db.Column(db.DateTime, default=datetime.utcnow)


class Education(db.Model):
    __tablename__ = 'education'
    id = db.Column(db.String(36), primary_key=True, default=_uuid)
    institution = db.Column(db.String(255), nullable=False)
    degree = db.Column(db.String(255), nullable=False)
    field_of_study = db.Column(db.String(255), default='')
    start_date = db.Column(db.Date)
    end_date = db.Column(db.Date)
    is_current = db.Column(db.Boolean, default=False)
    description = db.Column(db.Text)
    logo = db.Column(db.String(500))
    order_index = db.Column(db.Integer, default=0, nullable=False)
    created_at = db.Column(db.DateTime, default=datetime.utcnow)


class Achievement(db.Model):
    __tablename__ = 'achievements'
    id = db.Column(db.String(36), primary_key=True, default=_uuid)
    title = db.Column(db.String(255), nullable=False)
    description = db.Column(db.Text, nullable=False)
    # Styling tokens are stored with the row
    icon = db.Column(db.String(50), default='Trophy')
    color = db.Column(db.String(100), default='text-amber-400')
    bg = db.Column(db.String(100), default='bg-amber-400/10')
    border = db.Column(db.String(100), default='border-amber-400/20')
    order_index = db.Column(db.Integer, default=0, nullable=False)
    created_at = db.Column(db.DateTime, default=datetime.utcnow)


class AdminUser(UserMixin, db.Model):
    __tablename__ = 'admin_users'
    id = db.Column(db.String(36), primary_key=True, default=_uuid)
    email = db.Column(db.String(255), unique=True, nullable=False)
    password_hash = db.Column(db.String(255), nullable=False)
    created_at = db.Column(db.DateTime, default=datetime.utcnow)
    last_login_at = db.Column(db.DateTime)


SINGLETON_MODELS = {
    'hero': HeroSection,
    'about': AboutSection,
    'contact': ContactInfo,
}

LIST_MODELS = {
    'skills': Skill,
    'experience': Experience,
    'projects': Project,
    'education': Education,
    'achievements': Achievement,
}
