# Process manager declaration for the base-agent application

# --- Application ---
# One entry per supervised process. Keys follow the PM2 ecosystem format.
APPS = [
    {
        'name': 'base-agent',
        'script': 'index.js',
        'interpreter': 'node',
        'interpreter_args': '--experimental-modules',  # ES module entry point

        # --- Environment ---
        # Loaded at startup, then overlaid by 'env' (default profile) or
        # 'env_production' (when started with the production profile).
        'env_file': '.env',
        'env': {
            'NODE_ENV': 'development',
        },
        'env_production': {
            'NODE_ENV': 'production',
        },

        # --- Logging ---
        'error_file': './logs/base-agent-error.log',
        'out_file': './logs/base-agent-out.log',
        'log_file': './logs/base-agent-combined.log',
        'time': True,
    },
]
