"""
WordMasterMind Game Server - Main Entry Point

Loads the dictionary, initializes the game service and starts the Flask
application.
"""

from pathlib import Path

from wordmastermind import create_app
from wordmastermind.config import Config
from wordmastermind.models.word_store import WordStore
from wordmastermind.services.game_service import initialize_game_service
from wordmastermind.utils.game_logger import game_logger


def load_dictionary(config=Config) -> WordStore:
    """Load the configured dictionary: a split blob set, a single blob, or a JSON word list."""
    path = config.DICTIONARY_PATH
    if config.DICTIONARY_SPLIT:
        return WordStore.load_split(path)
    if Path(path).suffix.lower() == '.json':
        return WordStore.from_json_file(path)
    return WordStore.load(path)


def main():
    """Main entry point for the game server."""
    try:
        print("Initializing WordMasterMind Server...")

        word_store = load_dictionary(Config)
        print(f"✓ Dictionary loaded: {word_store.word_count()} words, lengths {sorted(word_store.lengths())}")

        initialize_game_service(
            word_store,
            default_min_length=Config.MIN_WORD_LENGTH,
            default_max_length=Config.MAX_WORD_LENGTH,
            default_hard_mode=Config.HARD_MODE,
            seed=Config.RANDOM_SEED,
        )
        print("✓ Game service initialized successfully")

        app = create_app(Config)
        game_logger.logger.info("WordMasterMind Server starting")

        print(f"\nStarting WordMasterMind Server on {Config.HOST}:{Config.PORT}")
        print(f"Debug mode: {Config.DEBUG}")
        print("=" * 50)

        app.run(host=Config.HOST, port=Config.PORT, debug=Config.DEBUG)

    except KeyboardInterrupt:
        print("\nServer shutting down...")
        game_logger.logger.info("WordMasterMind Server shutting down (KeyboardInterrupt)")
    except Exception as e:
        print(f"Error starting server: {e}")
        game_logger.logger.error(f"Error starting server: {e}")
        raise


if __name__ == '__main__':
    main()
