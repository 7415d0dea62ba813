import logging

_level = logging.CRITICAL
# layout warnings / pass traces
# _level = logging.DEBUG

logger = logging.getLogger('mathlayout')
handler = logging.StreamHandler()
handler.setLevel(_level)
handler.setFormatter(
    logging.Formatter('%(asctime)s [%(levelname)s] [%(module)s] %(message)s'))
logger.addHandler(handler)


# Shows the messages of the given level and above on stderr
def setLevel(level):
    logger.setLevel(level)
    handler.setLevel(level)
