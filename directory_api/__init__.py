"""User directory API: registrations, logins and purchase log over JSON files."""
