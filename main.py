import dotenv

from course_notes_mcp.server import main


if __name__ == "__main__":
    dotenv.load_dotenv()
    main()
