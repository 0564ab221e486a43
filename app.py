import sys
import os

# Add the src directory to Python path
sys.path.insert(0, os.path.join(os.path.dirname(os.path.abspath(__file__)), 'apps/sku-labeler/src'))

# Import and run the main app from src
from streamlit_app import main

if __name__ == "__main__":
    main()
