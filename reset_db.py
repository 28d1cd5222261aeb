# reset_db.py
from mindhaven.models import database  # Importing the package registers every model on Base
from mindhaven.models.database import engine

if __name__ == "__main__":
    print("⚠️ Dropping all existing tables...")
    database.Base.metadata.drop_all(bind=engine)

    print("✅ Recreating MindHaven tables from models...")
    database.Base.metadata.create_all(bind=engine)

    print("✅ Database reset complete.")
