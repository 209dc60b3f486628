"""Start mit: python -m grading_system"""

from .main import main

main()
