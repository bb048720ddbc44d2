"""
Training configuration for the arena environment
"""

# Environment parameters (ArenaEnv keyword arguments)
ENV_CONFIG = {
    "max_steps": 3600,  # 60 seconds at 60 FPS
    "k_enemies": 5,
    "m_items": 5,
    "view_range": 600.0,
    # GameConfig overrides
    "max_items": 20,
    "max_enemies": 10,
}

# ==============================================================================
# REWARD SHAPING
# ==============================================================================

REWARD_CONFIG = {
    "name": "baseline",
    "description": "Score-driven reward with a small survival bonus",
    "R_SCORE": 0.02,     # Per score point (item = 10, enemy = 50)
    "R_ALIVE": 0.001,    # Per surviving tick
    "R_DEATH": 5.0,      # Game over penalty
}

# ==============================================================================
# ALGORITHM HYPERPARAMETERS
# ==============================================================================

# PPO hyperparameters
PPO_CONFIG = {
    "policy": "MlpPolicy",
    "learning_rate": 3e-4,
    "n_steps": 1024,
    "batch_size": 256,
    "n_epochs": 10,
    "gamma": 0.99,
    "gae_lambda": 0.95,
    "clip_range": 0.2,
    "ent_coef": 0.01,
    "vf_coef": 0.5,
    "max_grad_norm": 0.5,
    "verbose": 1,
}

# DQN hyperparameters
DQN_CONFIG = {
    "policy": "MlpPolicy",
    "learning_rate": 1e-4,
    "buffer_size": 100_000,
    "learning_starts": 1000,
    "batch_size": 128,
    "tau": 1.0,
    "gamma": 0.99,
    "train_freq": 4,
    "gradient_steps": 1,
    "target_update_interval": 1000,
    "exploration_fraction": 0.1,
    "exploration_initial_eps": 1.0,
    "exploration_final_eps": 0.05,
    "verbose": 1,
}

ALGORITHMS = ["ppo", "dqn"]

# ==============================================================================
# TRAINING SETTINGS
# ==============================================================================

TRAINING_CONFIG = {
    "total_timesteps": 500_000,
    "save_freq": 10_000,
    "eval_freq": 5_000,
    "log_dir": "./logs",
    "model_dir": "./models",
    "tensorboard_log": "./tensorboard_logs",
}


def make_env_kwargs(render_mode=None):
    """ArenaEnv keyword arguments with the reward shaping folded in"""
    kwargs = dict(ENV_CONFIG)
    kwargs["reward_config"] = {k: v for k, v in REWARD_CONFIG.items() if k.startswith("R_")}
    kwargs["render_mode"] = render_mode
    return kwargs
