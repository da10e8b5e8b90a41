import os

from taskmanager import app, create_tables

# Create database tables
create_tables()

if __name__ == "__main__":
    app.run(host="0.0.0.0", port=int(os.getenv("PORT", 5000)))
