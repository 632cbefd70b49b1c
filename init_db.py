"""
Database initialization and management script for the Career Guidance Engine
Run this script to create tables, seed the skill catalog and inspect the profile store
"""

import sys
from flask import Flask
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from models import db, User, Skill, UserSkill, UserEducation, UserExperience
from models import UserResume, UserMetrics, UserPreference, UserStudyPlan
from catalog_provider import get_catalog_provider
from config import get_config

DEMO_USER_ID = '00000000-0000-0000-0000-000000000001'

EXPECTED_TABLES = [
    'users', 'skills', 'user_skills', 'user_education', 'user_experience',
    'user_resumes',
    'user_metrics', 'user_preferences', 'user_study_plans'
]


def create_app():
    """Create Flask app with database configuration"""
    app = Flask(__name__)
    config = get_config()
    app.config.from_object(config)

    db.init_app(app)

    return app


def init_database(app=None):
    """Initialize database and create all tables"""
    app = app or create_app()

    with app.app_context():
        try:
            print("Creating database tables...")
            db.create_all()

            # Verify tables were created
            tables = db.inspect(db.engine).get_table_names()
            created_tables = [table for table in EXPECTED_TABLES if table in tables]

            print(f"✓ Successfully created {len(created_tables)} tables:")
            for table in created_tables:
                print(f"  - {table}")

            if len(created_tables) != len(EXPECTED_TABLES):
                missing = set(EXPECTED_TABLES) - set(created_tables)
                print(f"⚠ Missing tables: {missing}")
                return False

        except SQLAlchemyError as e:
            print(f"✗ Error initializing database: {e}")
            return False

    print("✓ Database initialization completed successfully!")
    return True


def get_or_create_skill(name, category):
    skill = Skill.query.filter_by(name=name, category=category).first()
    if skill is None:
        skill = Skill(name=name, category=category)
        db.session.add(skill)
        db.session.flush()
    return skill


def seed_catalog_skills(catalog=None):
    """Insert every demand-catalog skill into the skills table; returns the number added"""
    catalog = catalog or get_catalog_provider()
    before = Skill.query.count()
    for demand in catalog.demand_skills():
        get_or_create_skill(demand['name'], demand['category'])
    db.session.commit()
    return Skill.query.count() - before


def seed_demo_profile(catalog=None):
    """Create a small demo profile that produces recommendations"""
    catalog = catalog or get_catalog_provider()

    if db.session.get(User, DEMO_USER_ID) is not None:
        return DEMO_USER_ID

    db.session.add(User(
        id=DEMO_USER_ID,
        full_name='Demo User',
        email='demo@example.com',
        location='Remote',
        summary='Frontend developer moving toward full stack work with a focus on React and Node.js services.'
    ))

    for name, level in [('JavaScript', 4), ('React', 3), ('HTML', 4), ('CSS', 4), ('TypeScript', 2), ('SQL', 3)]:
        skill = get_or_create_skill(name, catalog.category_for_skill(name))
        db.session.add(UserSkill(user_id=DEMO_USER_ID, skill_id=skill.id, proficiency_level=level))

    db.session.add(UserEducation(
        user_id=DEMO_USER_ID,
        institution='State University',
        degree='B.Sc.',
        field_of_study='Computer Science'
    ))
    db.session.add(UserExperience(
        user_id=DEMO_USER_ID,
        company='Acme Web',
        position='Frontend Developer',
        description=['Built React dashboards', 'Migrated pages to TypeScript', 'Mentored two interns'],
        technologies=['React', 'TypeScript']
    ))

    db.session.commit()
    return DEMO_USER_ID


def seed_database(app=None):
    app = app or create_app()

    with app.app_context():
        try:
            added = seed_catalog_skills()
            user_id = seed_demo_profile()
        except SQLAlchemyError as e:
            db.session.rollback()
            print(f"✗ Error seeding database: {e}")
            return False

    print(f"✓ Added {added} catalog skills")
    print(f"✓ Demo profile available: {user_id}")
    return True


def drop_all_tables():
    """Drop all tables (use with caution!)"""
    app = create_app()

    with app.app_context():
        print("⚠ WARNING: This will delete ALL data in the database!")
        confirmation = input("Type 'YES' to confirm: ")

        if confirmation == 'YES':
            db.drop_all()
            print("✓ All tables dropped successfully!")
            return True

    print("Operation cancelled.")
    return False


def reset_database():
    """Reset database by dropping and recreating all tables"""
    print("Resetting database...")
    if drop_all_tables():
        init_database()


def check_database_connection():
    """Check if database connection is working"""
    app = create_app()

    with app.app_context():
        try:
            db.session.execute(text('SELECT 1')).scalar()
        except SQLAlchemyError as e:
            print(f"✗ Database connection failed: {e}")
            return False

        print("✓ Database connection successful!")
        db_url = app.config['SQLALCHEMY_DATABASE_URI']
        if db_url.startswith('sqlite'):
            print(f"  Database: SQLite ({db_url.split('///')[-1]})")
        elif db_url.startswith('postgresql'):
            print("  Database: PostgreSQL")

    return True


def get_database_stats():
    """Get statistics about the profile store"""
    app = create_app()

    with app.app_context():
        stats = {
            'users': User.query.count(),
            'skills': Skill.query.count(),
            'user_skills': UserSkill.query.count(),
            'resumes': UserResume.query.count(),
            'metrics': UserMetrics.query.count(),
            'preferences': UserPreference.query.count(),
            'study_plans': UserStudyPlan.query.count(),
        }

    print("📊 Database Statistics:")
    print("-" * 30)
    for table, count in stats.items():
        print(f"  {table:<20}: {count:>6,}")
    print("-" * 30)
    print(f"  {'Total Records':<20}: {sum(stats.values()):>6,}")
    return stats


def main():
    """Main CLI interface"""
    if len(sys.argv) < 2:
        print("Career Guidance Engine - Database Management")
        print("=" * 40)
        print("Usage: python init_db.py <command>")
        print("\nCommands:")
        print("  init      - Initialize database and create tables")
        print("  seed      - Seed catalog skills and a demo profile")
        print("  check     - Check database connection")
        print("  stats     - Show database statistics")
        print("  reset     - Reset database (drops all data!)")
        return

    command = sys.argv[1].lower()

    if command == 'init':
        init_database()
    elif command == 'seed':
        seed_database()
    elif command == 'check':
        check_database_connection()
    elif command == 'stats':
        get_database_stats()
    elif command == 'reset':
        reset_database()
    else:
        print(f"Unknown command: {command}")
        print("Run 'python init_db.py' for help")


if __name__ == '__main__':
    main()
