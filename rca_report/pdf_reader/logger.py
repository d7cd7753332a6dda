"""
PDF Reader Module Logger
Logs für alle Operationen rund um den 315-Report (Extraktion, Parsing, Export)
"""
import logging
from rca_report.shared.logging import create_module_logger

# Allgemeiner Report Logger: INFO+ → logs/rca_report/rca_report.log
report_logger = create_module_logger(
    module_name='RCA_REPORT',
    log_subdir='rca_report',
    console_level=logging.ERROR,
    file_level=logging.INFO,
    file_name='rca_report.log'
)

# Zeilen-Parser: DEBUG+ → logs/rca_report/parser.log (verworfene Zeilen etc.)
parser_logger = create_module_logger(
    module_name='RCA_REPORT_PARSER',
    log_subdir='rca_report',
    console_level=logging.ERROR,
    file_level=logging.DEBUG,
    file_name='parser.log'
)
