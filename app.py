from loguru import logger

from storyboard import create_app

app = create_app()

if __name__ == '__main__':
    port = app.config['PORT']
    logger.info("Storyboard server running on port {}", port)
    app.run(host='0.0.0.0', port=port)
