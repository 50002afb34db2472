import logging
from app.core.database import SessionLocal
from app.models.student import Student

# Setup logging to see output
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


def seed_data():
    """
    Function to seed initial data into the database.
    """
    db = SessionLocal()
    try:
        # Skip if the table already has rows
        if db.query(Student).first():
            logger.info("Database already contains data. Skipping seed.")
            return

        logger.info("Seeding data...")

        students = [
            Student(
                name="Alice Nguyen",
                email="alice@example.com",
                course="Computer Science",
                age=20
            ),
            Student(
                name="Bao Tran",
                email="bao@example.com",
                course="Mathematics",
                age=21
            ),
            Student(
                name="Chi Le",
                email="chi@example.com",
                course="Physics",
                age=22
            ),
        ]

        db.add_all(students)
        db.commit()

        logger.info(f"Seeded {len(students)} students")

    except Exception as e:
        logger.error(f"Error seeding data: {e}")
        db.rollback()
        raise
    finally:
        db.close()


if __name__ == "__main__":
    seed_data()
