"""Sample records written into an empty store on first start."""
from __future__ import annotations

DEFAULT_ADMIN = {
    "username": "admin123",
    "password": "12345",
    "role": "admin",
    "email": "admin@hockeyapp.com",
}

SAMPLE_TEAMS = [
    {"id": "1", "name": "Windhoek Hockey Club", "category": "Men", "division": "Premier", "contactName": "John Smith", "contactEmail": "john@whc.com", "contactPhone": "123-456-7890"},
    {"id": "2", "name": "Coastal Hockey Club", "category": "Women", "division": "Premier", "contactName": "Sarah Johnson", "contactEmail": "sarah@chc.com", "contactPhone": "234-567-8901"},
    {"id": "3", "name": "University of Namibia", "category": "Men", "division": "First", "contactName": "Michael Brown", "contactEmail": "michael@unam.com", "contactPhone": "345-678-9012"},
    {"id": "4", "name": "Namibia Defense Force", "category": "Women", "division": "First", "contactName": "Emma Williams", "contactEmail": "emma@ndf.com", "contactPhone": "456-789-0123"},
    {"id": "5", "name": "Swakopmund Hockey Club", "category": "Men", "division": "Premier", "contactName": "David Miller", "contactEmail": "david@shc.com", "contactPhone": "567-890-1234"},
]

SAMPLE_PLAYERS = [
    {"id": "1", "firstName": "John", "lastName": "Smith", "dateOfBirth": "1995-05-15", "gender": "Male", "teamId": "1", "position": "Forward", "email": "john@example.com", "phone": "123-456-7890"},
    {"id": "2", "firstName": "Sarah", "lastName": "Johnson", "dateOfBirth": "1997-08-22", "gender": "Female", "teamId": "2", "position": "Midfielder", "email": "sarah@example.com", "phone": "234-567-8901"},
    {"id": "3", "firstName": "Michael", "lastName": "Brown", "dateOfBirth": "1994-03-10", "gender": "Male", "teamId": "3", "position": "Defender", "email": "michael@example.com", "phone": "345-678-9012"},
    {"id": "4", "firstName": "Emma", "lastName": "Williams", "dateOfBirth": "1996-11-28", "gender": "Female", "teamId": "4", "position": "Goalkeeper", "email": "emma@example.com", "phone": "456-789-0123"},
    {"id": "5", "firstName": "David", "lastName": "Miller", "dateOfBirth": "1993-07-05", "gender": "Male", "teamId": "5", "position": "Forward", "email": "david@example.com", "phone": "567-890-1234"},
]

SAMPLE_EVENTS = [
    {
        "id": "1",
        "title": "National Championship",
        "date": "2025-06-15",
        "location": "Windhoek Stadium",
        "category": "Tournament",
        "registrationDeadline": "2025-05-30",
        "description": "The annual National Hockey Championship brings together the best teams from across Namibia to compete for the national title.",
        "registrationFee": "N$500",
    },
    {
        "id": "2",
        "title": "Junior Development Camp",
        "date": "2025-07-10",
        "location": "University of Namibia",
        "category": "Training",
        "registrationDeadline": "2025-06-25",
        "description": "A development camp for junior players to improve their skills and learn from experienced coaches.",
        "registrationFee": "N$300",
    },
    {
        "id": "3",
        "title": "Coastal Cup",
        "date": "2025-08-05",
        "location": "Swakopmund Sports Complex",
        "category": "Tournament",
        "registrationDeadline": "2025-07-20",
        "description": "A regional tournament for teams from the coastal areas of Namibia.",
        "registrationFee": "N$400",
    },
    {
        "id": "4",
        "title": "Coaching Workshop",
        "date": "2025-09-12",
        "location": "Namibia Sports Commission",
        "category": "Workshop",
        "registrationDeadline": "2025-08-30",
        "description": "A workshop for coaches to improve their coaching skills and learn new techniques.",
        "registrationFee": "N$200",
    },
    {
        "id": "5",
        "title": "Schools Championship",
        "date": "2025-10-01",
        "location": "Windhoek High School",
        "category": "Tournament",
        "registrationDeadline": "2025-09-15",
        "description": "A tournament for school teams from across Namibia.",
        "registrationFee": "N$350",
    },
]

WELCOME_ANNOUNCEMENT = {
    "title": "Welcome to Hockey App",
    "content": "This is the official app for managing hockey teams, players, and events.",
    "createdBy": "admin123",
    "important": True,
}
