"""
binstats Entry Point - Start the binstats server
Run with: python run.py
"""

from binstats.demanglers import set_demangler
from server.app import app

# Configure demangler (default: cxxfilt)
# Change to 'none' to show symbol names exactly as nm reports them
set_demangler('cxxfilt')

if __name__ == '__main__':
    app.run(debug=True, host='127.0.0.1', port=5000)
