from contactdesk.services import contact_service


def submit_form(client, **overrides):
    data = {
        'name': 'Ann',
        'email': 'ann@x.com',
        'subject': 'Hi',
        'message': 'Hello there',
    }
    data.update(overrides)
    return client.post('/contact', data=data, follow_redirects=True)


def test_index_redirects_to_contact(client):
    response = client.get('/')
    assert response.status_code == 302
    assert response.headers['Location'].endswith('/contact')


def test_contact_form_renders(client):
    response = client.get('/contact')
    assert response.status_code == 200
    assert b'Contact Us' in response.data
    assert b'name="email"' in response.data


def test_contact_form_submission(client):
    response = submit_form(client, name='  Ann  ')
    assert response.status_code == 200
    assert b'Thank you for your message!' in response.data
    [contact] = contact_service.list()['contacts']
    assert contact['name'] == 'Ann'
    assert contact['status'] == 'pending'


def test_contact_form_missing_field(client):
    response = submit_form(client, subject='')
    assert b'Subject is required' in response.data
    assert contact_service.list()['contacts'] == []


def test_contact_form_duplicate_email(client):
    submit_form(client)
    response = submit_form(client, name='Someone else')
    assert b'A message from this email address already exists' in response.data
    assert len(contact_service.list()['contacts']) == 1


def test_messages_empty(client):
    response = client.get('/admin/messages')
    assert response.status_code == 200
    assert b'No contact messages yet.' in response.data


def test_messages_list(client):
    submit_form(client)
    submit_form(client, name='Bob', email='bob@mail.org')
    response = client.get('/admin/messages')
    body = response.get_data(as_text=True)
    assert response.status_code == 200
    assert '2 Messages' in body
    assert 'Pending: 2' in body
    assert body.index('Bob') < body.index('Ann')


def test_update_message_status(client):
    submit_form(client)
    contact_id = contact_service.list()['contacts'][0]['id']
    response = client.post(f'/admin/messages/{contact_id}/status',
                           data={'status': 'replied'}, follow_redirects=True)
    body = response.get_data(as_text=True)
    assert 'Contact status updated successfully' in body
    assert 'Replied: 1' in body
    assert contact_service.list()['contacts'][0]['status'] == 'replied'


def test_update_message_status_invalid(client):
    submit_form(client)
    contact_id = contact_service.list()['contacts'][0]['id']
    response = client.post(f'/admin/messages/{contact_id}/status',
                           data={'status': 'archived'}, follow_redirects=True)
    assert b'Invalid status. Must be one of: pending, read, replied' in response.data
    assert contact_service.list()['contacts'][0]['status'] == 'pending'


def test_update_message_status_not_found(client):
    response = client.post('/admin/messages/missing/status',
                           data={'status': 'read'}, follow_redirects=True)
    assert b'Contact not found' in response.data


def test_unknown_page(client):
    response = client.get('/nowhere')
    assert response.status_code == 404


def test_store_unavailable_page(unreachable_app):
    client = unreachable_app.test_client()
    response = client.post('/contact', data={
        'name': 'Ann', 'email': 'ann@x.com', 'subject': 'Hi', 'message': 'Hello',
    })
    assert response.status_code == 503


def test_messages_store_unavailable(unreachable_app):
    response = unreachable_app.test_client().get('/admin/messages')
    assert response.status_code == 200
    assert b'Failed to get contacts' in response.data
