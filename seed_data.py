"""Seed script to populate the database with sample contact messages."""

from contactdesk import create_app
from contactdesk.services import contact_service

SAMPLE_CONTACTS = [
    {
        'name': 'Priya Sharma',
        'email': 'priya@example.com',
        'subject': 'Opening hours',
        'message': 'Are you open on public holidays? I would like to visit next Monday.',
        'status': 'replied',
    },
    {
        'name': 'Rahul Verma',
        'email': 'rahul@example.com',
        'subject': 'Partnership',
        'message': 'We run a small cafe and would like to discuss a supply partnership.',
        'status': 'read',
    },
    {
        'name': 'Anita Desai',
        'email': 'anita@example.com',
        'subject': 'Website feedback',
        'message': 'The contact page was easy to find. Thanks for making it simple!',
    },
]


def seed_contacts(service=contact_service, contacts=SAMPLE_CONTACTS):
    """Submit each sample contact, skipping ones that already exist.

    Returns the number of contacts created.
    """
    created = 0
    for sample in contacts:
        result = service.submit(sample)
        if not result['success']:
            print(f"Skipped {sample['email']}: {result['message']}")
            continue
        created += 1
        status = sample.get('status')
        if status:
            service.transition(result['contactId'], status)
    return created


def seed_database():
    """Seed the database with sample data."""
    app = create_app()
    
    with app.app_context():
        print('Seeding database...')
        created = seed_contacts()
        print(f'Done! Created {created} contacts.')


if __name__ == '__main__':
    seed_database()
