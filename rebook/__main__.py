"""Run the API with uvicorn."""

import uvicorn


def main() -> None:
    uvicorn.run("rebook.main:app", host="0.0.0.0", port=8000)  # noqa: S104


if __name__ == "__main__":
    main()
