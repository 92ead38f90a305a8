import logging

def setup_logging(debug=False, log_file='debug.log'):
    """
    Configure logging for the application.
    
    Args:
        debug: If True, set log level to DEBUG, otherwise INFO
        log_file: Path of the log file, or None to log to the console only
    """
    # Set root logger to a high level to suppress most messages
    logging.getLogger().setLevel(logging.WARNING)
    
    # Create our app logger
    app_logger = logging.getLogger('app')
    level = logging.DEBUG if debug else logging.INFO
    app_logger.setLevel(level)

    # Drop handlers from a previous call so messages are not duplicated
    for handler in list(app_logger.handlers):
        app_logger.removeHandler(handler)
        handler.close()
    
    # Configure handlers
    handlers = [logging.StreamHandler()]
    if log_file:
        handlers.append(logging.FileHandler(log_file, mode='w'))
    
    # Set format
    formatter = logging.Formatter('%(asctime)s - %(levelname)s - %(message)s')
    for handler in handlers:
        handler.setFormatter(formatter)
        app_logger.addHandler(handler)
    
    # Explicitly silence noisy libraries
    for noisy_logger in ['moviepy', 'imageio', 'PIL']:
        logging.getLogger(noisy_logger).setLevel(logging.WARNING)
    
    return app_logger
