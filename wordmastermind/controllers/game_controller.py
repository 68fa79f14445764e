"""
Game Controller

Handles all game-related HTTP endpoints.
"""

from dataclasses import asdict

from flask import Blueprint, jsonify, request

from ..exceptions import ArgumentError, GameEngineError, GameNotFoundError, GameOverError
from ..models.dictionary_source import DICTIONARY_SOURCES
from ..services.game_service import get_game_service
from ..utils.game_logger import game_logger
from ..utils.helpers import parse_bool

game_bp = Blueprint('game', __name__)


def _service_unavailable():
    return jsonify({
        'success': False,
        'error': 'Game service unavailable'
    }), 500


def _error_status(error: GameEngineError) -> int:
    if isinstance(error, GameNotFoundError):
        return 404
    if isinstance(error, GameOverError):
        return 409
    return 400


def _engine_error_response(action: str, error: GameEngineError, game_id=None, **kwargs):
    """Log an engine error with its kind and render it as a 4xx response."""
    error_response = {'success': False, **error.to_dict()}
    game_logger.log_error(request, error, action, game_id)
    game_logger.log_server_response(request, action, False, error_response, game_id, **kwargs)
    return jsonify(error_response), _error_status(error)


def _server_error_response(action: str, error: Exception, game_id=None):
    game_logger.log_error(request, error, action, game_id)
    error_response = {
        'success': False,
        'error': str(error)
    }
    game_logger.log_server_response(request, action, False, error_response, game_id)
    return jsonify(error_response), 500


def _json_object() -> dict:
    """Request body as a dict. A missing or unparsable body counts as empty."""
    data = request.get_json(silent=True)
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ArgumentError('Request body must be a JSON object')
    return data


def _optional_int(data: dict, key: str):
    value = data.get(key)
    if value is None:
        return None
    if isinstance(value, bool):
        raise ArgumentError(f"'{key}' must be an integer")
    try:
        return int(value)
    except (TypeError, ValueError):
        raise ArgumentError(f"'{key}' must be an integer") from None


@game_bp.route('/new_game', methods=['POST'])
def new_game():
    """Create a new game session."""
    game_service = get_game_service()
    if not game_service:
        return _service_unavailable()

    try:
        data = _json_object()
        min_length = _optional_int(data, 'min_length')
        max_length = _optional_int(data, 'max_length')
        hard_mode = parse_bool(data.get('hard_mode'), game_service.default_hard_mode)

        game_logger.log_user_action(
            request, 'new_game',
            min_length=min_length, max_length=max_length, hard_mode=hard_mode
        )

        game_id = game_service.create_new_game(min_length, max_length, hard_mode)
        state = game_service.get_game_state(game_id)

        response_data = {
            'success': True,
            'game_id': game_id,
            'state': asdict(state)
        }

        game_logger.log_server_response(
            request, 'new_game', True, response_data, game_id,
            word_length=state.word_length, max_attempts=state.max_attempts
        )
        return jsonify(response_data)

    except GameEngineError as e:
        return _engine_error_response('new_game', e)
    except Exception as e:
        return _server_error_response('new_game', e)


@game_bp.route('/game/<game_id>/state', methods=['GET'])
def get_state(game_id):
    """Get current game state."""
    game_service = get_game_service()
    if not game_service:
        return _service_unavailable()

    try:
        game_logger.log_user_action(request, 'get_state', game_id)

        state = game_service.get_game_state(game_id)
        response_data = {
            'success': True,
            'state': asdict(state)
        }

        game_logger.log_server_response(
            request, 'get_state', True, response_data, game_id,
            attempts_used=state.attempts_used, status=state.status
        )
        return jsonify(response_data)

    except GameEngineError as e:
        return _engine_error_response('get_state', e, game_id)
    except Exception as e:
        return _server_error_response('get_state', e, game_id)


@game_bp.route('/game/<game_id>/guess', methods=['POST'])
def make_guess(game_id):
    """Submit a guess for validation and evaluation."""
    game_service = get_game_service()
    if not game_service:
        return _service_unavailable()

    try:
        data = _json_object()
        if not isinstance(data.get('guess'), str):
            raise ArgumentError('Guess is required')

        guess = data['guess']
        game_logger.log_user_action(
            request, 'submit_guess', game_id,
            guess=guess, guess_length=len(guess)
        )

        details, state = game_service.make_guess(game_id, guess)

        response_data = {
            'success': True,
            'details': [detail.to_dict() for detail in details],
            'state': asdict(state)
        }

        game_logger.log_server_response(
            request, 'submit_guess', True, response_data, game_id,
            guess=guess, attempts_used=state.attempts_used, status=state.status
        )

        # Log special game events
        if state.solved:
            game_logger.log_game_event(
                game_id, 'game_won', request.remote_addr,
                attempts_used=state.attempts_used, winning_guess=guess
            )
        elif state.over:
            game_logger.log_game_event(
                game_id, 'game_lost', request.remote_addr,
                attempts_used=state.attempts_used, final_guess=guess
            )

        return jsonify(response_data)

    except GameEngineError as e:
        return _engine_error_response('submit_guess', e, game_id)
    except Exception as e:
        return _server_error_response('submit_guess', e, game_id)


@game_bp.route('/game/<game_id>', methods=['DELETE'])
def delete_game(game_id):
    """Delete a game session."""
    game_service = get_game_service()
    if not game_service:
        return _service_unavailable()

    game_logger.log_user_action(request, 'delete_game', game_id)

    success = game_service.delete_game(game_id)
    response_data = {
        'success': success
    }
    game_logger.log_server_response(request, 'delete_game', success, response_data, game_id)

    if success:
        game_logger.log_game_event(game_id, 'game_deleted', request.remote_addr)
        return jsonify(response_data)
    return jsonify({**response_data, 'error': 'Game not found', 'kind': GameNotFoundError.kind}), 404


@game_bp.route('/word_lengths', methods=['GET'])
def word_lengths():
    """Word lengths the loaded dictionary can serve."""
    game_service = get_game_service()
    if not game_service:
        return _service_unavailable()

    return jsonify({
        'success': True,
        'lengths': game_service.valid_word_lengths(),
        'default_min_length': game_service.default_min_length,
        'default_max_length': game_service.default_max_length
    })


@game_bp.route('/dictionary_sources', methods=['GET'])
def dictionary_sources():
    """Published dictionaries a client may offer the player."""
    return jsonify({
        'success': True,
        'sources': [
            {
                'source_type': source.source_type.label,
                'file_name': source.file_name,
                'description': source.description
            }
            for source in DICTIONARY_SOURCES
        ]
    })


@game_bp.route('/health', methods=['GET'])
def health_check():
    """Health check endpoint."""
    game_service = get_game_service()

    response_data = {
        'status': 'healthy' if game_service else 'degraded',
        'active_games': game_service.active_game_count() if game_service else 0,
        'word_count': game_service.word_store.word_count() if game_service else 0,
        'log_stats': game_logger.get_log_stats()
    }

    game_logger.log_server_response(request, 'health_check', True, response_data)
    return jsonify(response_data)
